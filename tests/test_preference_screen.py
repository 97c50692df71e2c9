from sysupdate.adapters.preference_screen import HandlerActivity, InMemoryPreferenceScreen, PreferenceEntry

ACTION = "android.settings.SYSTEM_UPDATE_SETTINGS"


def _screen(handlers):
    return InMemoryPreferenceScreen(
        entries=[
            PreferenceEntry("system_update_settings", "System updates", intent_action=ACTION),
            PreferenceEntry("additional_system_update_settings", "Additional"),
        ],
        handlers=handlers,
    )


def test_rebind_to_system_handler_adopts_title():
    screen = _screen([HandlerActivity(ACTION, "com.vendor", ".Update", "Vendor update", system=True)])

    assert screen.rebind_to_matching_handler_or_remove("system_update_settings", True) is True

    entry = screen.find_preference("system_update_settings")
    assert entry.component == "com.vendor/.Update"
    assert entry.title == "Vendor update"


def test_rebind_keeps_title_when_not_requested():
    screen = _screen([HandlerActivity(ACTION, "com.vendor", ".Update", "Vendor update", system=True)])

    screen.rebind_to_matching_handler_or_remove("system_update_settings", False)

    assert screen.find_preference("system_update_settings").title == "System updates"


def test_rebind_ignores_non_system_handlers():
    screen = _screen([HandlerActivity(ACTION, "com.thirdparty", ".Fake", "Fake", system=False)])

    assert screen.rebind_to_matching_handler_or_remove("system_update_settings", True) is False
    assert screen.keys == ["additional_system_update_settings"]


def test_rebind_without_intent_removes_entry():
    screen = _screen([HandlerActivity(ACTION, "com.vendor", ".Update", system=True)])

    assert screen.rebind_to_matching_handler_or_remove("additional_system_update_settings", True) is False
    assert screen.keys == ["system_update_settings"]


def test_rebind_absent_entry():
    screen = InMemoryPreferenceScreen()
    assert screen.rebind_to_matching_handler_or_remove("system_update_settings", True) is False


def test_find_and_remove():
    screen = _screen([])
    entry = screen.find_preference("additional_system_update_settings")

    screen.remove_preference(entry)

    assert screen.find_preference("additional_system_update_settings") is None
    assert screen.keys == ["system_update_settings"]
