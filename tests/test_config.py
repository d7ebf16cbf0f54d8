import json

from rqstore.config import DBConfig


def test_defaults_are_on_disk_without_fk():
    cfg = DBConfig()
    assert cfg.memory is False
    assert cfg.on_disk_path == ""
    assert cfg.fk_constraints is False


def test_memory_flag_is_kept():
    cfg = DBConfig(memory=True)
    assert cfg.memory is True
    assert cfg.fk_constraints is False


def test_to_dict_omits_empty_on_disk_path():
    cfg = DBConfig(memory=True)
    assert cfg.to_dict() == {"memory": True, "fk_constraints": False}


def test_to_dict_includes_on_disk_path_when_set():
    cfg = DBConfig(memory=False, on_disk_path="/tmp/db/explicit-path.db", fk_constraints=True)
    assert cfg.to_dict() == {
        "memory": False,
        "on_disk_path": "/tmp/db/explicit-path.db",
        "fk_constraints": True,
    }


def test_to_dict_is_json_serialisable_and_round_trips():
    cfg = DBConfig(memory=False, on_disk_path="a.db", fk_constraints=True)
    decoded = json.loads(json.dumps(cfg.to_dict()))
    assert DBConfig(**decoded) == cfg


def test_to_dict_key_order():
    cfg = DBConfig(on_disk_path="x.db")
    assert list(cfg.to_dict()) == ["memory", "on_disk_path", "fk_constraints"]