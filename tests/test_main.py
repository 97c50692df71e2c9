import dataclasses
import json

from sysupdate import main as cli
from sysupdate.adapters import broadcast as bc
from sysupdate.core.config_model import AppConfig
from sysupdate.search_index import SearchIndexProvider

DEFAULTS = AppConfig(
    admin_user=True,
    additional_setting_enabled=False,
    carrier_config_path=None,
    broadcast_backend="log",
    adb_serial=None,
    debug=False,
)


def _run(monkeypatch, argv):
    monkeypatch.setattr(cli, "load_app_config", lambda: DEFAULTS)
    return cli.main(argv)


def test_main_layout(monkeypatch, capsys):
    assert _run(monkeypatch, []) == 0
    out = capsys.readouterr().out

    assert "system_update_settings: System update -> com.google.android.gms/" in out
    assert "additional_system_update_settings" not in out.split("Non-indexable")[0]
    assert "Non-indexable keys: additional_system_update_settings" in out


def test_main_nothing_visible(monkeypatch, capsys):
    _run(monkeypatch, ["--no-admin"])
    out = capsys.readouterr().out

    assert "(none)" in out
    assert "Non-indexable keys: system_update_settings, additional_system_update_settings" in out


def test_main_click_broadcasts(monkeypatch, capsys, tmp_path):
    path = tmp_path / "carrier.json"
    path.write_text(
        json.dumps(
            {
                "ci_action_on_sys_update_bool": True,
                "ci_action_on_sys_update_intent_string": "com.example.ACTION",
                "ci_action_on_sys_update_extra_string": "reason",
                "ci_action_on_sys_update_extra_val_string": "click",
            }
        )
    )

    _run(monkeypatch, ["--carrier-config", str(path), "--click", "system_update_settings"])
    out = capsys.readouterr().out

    assert "Click system_update_settings: handled=False" in out
    assert "Broadcast: com.example.ACTION --es reason click" in out


def test_search_index_provider_returns_fresh_list():
    controller = cli.build_controller(DEFAULTS)
    provider = SearchIndexProvider(controller)

    first = provider.get_non_indexable_keys()
    first.append("mutated")

    assert provider.get_non_indexable_keys() == ["additional_system_update_settings"]


ADB_DEFAULTS = dataclasses.replace(DEFAULTS, broadcast_backend="adb")


def _carrier_config(tmp_path):
    path = tmp_path / "carrier.json"
    path.write_text(
        json.dumps(
            {
                "ci_action_on_sys_update_bool": True,
                "ci_action_on_sys_update_intent_string": "com.example.ACTION",
            }
        )
    )
    return str(path)


def test_adb_flag_follows_config_and_can_be_negated():
    assert cli.parse_args([], defaults=ADB_DEFAULTS).adb is True
    assert cli.parse_args(["--no-adb"], defaults=ADB_DEFAULTS).adb is False
    assert cli.parse_args(["--adb"], defaults=DEFAULTS).adb is True


def test_main_no_adb_overrides_adb_config(monkeypatch, capsys, tmp_path):
    def _fail(self, *args, **kwargs):
        raise AssertionError("adb sink must not be used")

    monkeypatch.setattr(bc.AdbBroadcastAdapter, "send", _fail)
    monkeypatch.setattr(cli, "load_app_config", lambda: ADB_DEFAULTS)

    cli.main(["--no-adb", "--carrier-config", _carrier_config(tmp_path), "--click", "system_update_settings"])

    assert "Broadcast: com.example.ACTION" in capsys.readouterr().out


def test_build_controller_uses_adb_when_available(monkeypatch):
    monkeypatch.setattr(bc.AdbBroadcastAdapter, "is_available", lambda self: True)

    controller = cli.build_controller(ADB_DEFAULTS)

    assert isinstance(controller._context.broadcast, bc.AdbBroadcastAdapter)


def test_build_controller_falls_back_when_adb_missing(monkeypatch, caplog):
    monkeypatch.setattr(bc.AdbBroadcastAdapter, "is_available", lambda self: False)

    with caplog.at_level("WARNING", logger=cli.__name__):
        controller = cli.build_controller(ADB_DEFAULTS)

    assert isinstance(controller._context.broadcast, bc.LoggingBroadcastAdapter)
    assert "adb not found" in caplog.text
