# This file is part of ubuntunet. See LICENSE file for license information.


def compose_udev_equality(key, value):
    """Return a udev comparison clause, like `ACTION=="add"`."""
    assert key == key.upper()
    return '%s=="%s"' % (key, value)


def compose_udev_env_equality(variable, value):
    """Return a udev environment comparison, like `ENV{FOO}=="1"`."""
    assert variable == variable.upper()
    return 'ENV{%s}=="%s"' % (variable, value)


def compose_udev_env_setting(variable, value):
    """Return a udev environment assignment, like `ENV{NM_UNMANAGED}="1"`."""
    assert variable == variable.upper()
    return 'ENV{%s}="%s"' % (variable, value)


def generate_nm_unmanaged_rule(driver):
    """Return a udev rule hiding network devices bound to `driver` from NM.

    The rule ends up as a single line looking something like:

    ACTION=="add|change", SUBSYSTEM=="net", ENV{ID_NET_DRIVER}=="ixgbe",
    ENV{NM_UNMANAGED}="1"
    """
    rule = ", ".join(
        [
            compose_udev_equality("ACTION", "add|change"),
            compose_udev_equality("SUBSYSTEM", "net"),
            compose_udev_env_equality("ID_NET_DRIVER", driver),
            compose_udev_env_setting("NM_UNMANAGED", "1"),
        ]
    )
    return "%s\n" % rule
