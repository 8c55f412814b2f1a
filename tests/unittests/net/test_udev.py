# This file is part of ubuntunet. See LICENSE file for license information.

import pytest

from ubuntunet.net import udev


class TestUdevClauses:
    def test_equality(self):
        assert 'ACTION=="add"' == udev.compose_udev_equality("ACTION", "add")

    def test_env_equality(self):
        assert 'ENV{ID_NET_DRIVER}=="e1000"' == (
            udev.compose_udev_env_equality("ID_NET_DRIVER", "e1000")
        )

    def test_env_setting(self):
        assert 'ENV{NM_UNMANAGED}="1"' == (
            udev.compose_udev_env_setting("NM_UNMANAGED", "1")
        )

    @pytest.mark.parametrize(
        "func",
        (
            udev.compose_udev_equality,
            udev.compose_udev_env_equality,
            udev.compose_udev_env_setting,
        ),
    )
    def test_keys_must_be_upper_case(self, func):
        with pytest.raises(AssertionError):
            func("action", "add")


class TestGenerateNMUnmanagedRule:
    def test_rule(self):
        expected = (
            'ACTION=="add|change", SUBSYSTEM=="net", '
            'ENV{ID_NET_DRIVER}=="ixgbe", ENV{NM_UNMANAGED}="1"\n'
        )
        assert expected == udev.generate_nm_unmanaged_rule("ixgbe")

    def test_single_line(self):
        rule = udev.generate_nm_unmanaged_rule("mlx5_core")
        assert 1 == rule.count("\n")
        assert rule.endswith("\n")
