from rqstore.server import Server, Servers, new_server


def test_is_read_only_empty_collection():
    servers = Servers()
    assert servers.is_read_only("1") == (False, False)


def test_is_read_only_with_missing_entry():
    servers = Servers([None])
    _, found = servers.is_read_only("")
    assert found is False
    _, found = servers.is_read_only("node1")
    assert found is False


def test_is_read_only_voter():
    servers = Servers([Server(id="node1", addr="localhost:4002", suffrage="Voter")])
    ro, found = servers.is_read_only("node1")
    assert ro is False
    assert found is True


def test_is_read_only_unknown_id():
    servers = Servers([Server(id="node1", addr="localhost:4002", suffrage="Voter")])
    _, found = servers.is_read_only("node2")
    assert found is False


def test_is_read_only_nonvoter():
    servers = Servers([Server(id="node1", addr="localhost:4002", suffrage="Nonvoter")])
    ro, found = servers.is_read_only("node1")
    assert ro is True
    assert found is True


def test_is_read_only_tracks_replaced_entry():
    servers = Servers([None])
    assert servers.is_read_only("node1") == (False, False)
    servers[0] = Server(id="node1", addr="localhost:4002", suffrage="Nonvoter")
    assert servers.is_read_only("node1") == (True, True)


def test_new_server_voter():
    server = new_server("node1", "localhost:4002", True)
    assert server == Server(id="node1", addr="localhost:4002", suffrage="voter")


def test_new_server_nonvoter_is_read_only():
    server = new_server("node1", "localhost:4002", False)
    assert server.suffrage == "Nonvoter"
    assert Servers([server]).is_read_only("node1") == (True, True)


def test_sorted_by_id_orders_ascending_and_keeps_original():
    original = Servers(
        [new_server("c", "h3", True), new_server("a", "h1", True), new_server("b", "h2", False)]
    )
    ordered = original.sorted_by_id()
    assert [s.id for s in ordered] == ["a", "b", "c"]
    assert [s.id for s in original] == ["c", "a", "b"]
    assert isinstance(ordered, Servers)
    assert ordered.is_read_only("b") == (True, True)