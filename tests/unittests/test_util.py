# This file is part of ubuntunet. See LICENSE file for license information.

import os

import pytest

from ubuntunet import util


class TestTargetPath:
    def test_target_path_none_is_root(self):
        assert "/" == util.target_path(None)
        assert "/" == util.target_path("")
        assert "/etc/x" == util.target_path(None, "/etc/x")

    def test_relative_and_absolute_paths(self):
        assert "/target/my/path" == util.target_path("/target", "my/path")
        assert "/target/my/path" == util.target_path("/target", "/my/path")

    def test_bunch_of_slashes_in_path(self):
        assert "/target/my/path/" == util.target_path(
            "/target/", "//my/path/"
        )
        assert "/target/my/path/" == util.target_path(
            "/target/", "///my/path/"
        )

    def test_double_slash_target(self):
        assert "/my/path" == util.target_path("//", "my/path")

    def test_invalid_target(self):
        with pytest.raises(ValueError):
            util.target_path(1, "/etc")


class TestUmask:
    def test_restores_previous_umask(self):
        with util.umask(0o022):
            with util.umask(0o077) as old:
                assert 0o022 == old
                assert 0o077 == os.umask(0o077)
            assert 0o022 == os.umask(0o022)

    def test_restores_on_error(self):
        with util.umask(0o022):
            with pytest.raises(RuntimeError):
                with util.umask(0o077):
                    raise RuntimeError()
            assert 0o022 == os.umask(0o022)


class TestEnsureDir:
    def test_creates_parents(self, tmp_path):
        path = tmp_path / "a" / "b" / "c"
        util.ensure_dir(str(path))
        assert path.is_dir()

    def test_existing(self, tmp_path):
        util.ensure_dir(str(tmp_path))
        assert tmp_path.is_dir()


class TestLoadTextFile:
    def test_load(self, tmp_path):
        path = tmp_path / "f"
        path.write_bytes("ünïcode\n".encode("utf-8"))
        assert "ünïcode\n" == util.load_text_file(str(path))

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            util.load_text_file(str(tmp_path / "no"))


class TestFindFiles:
    def test_sorted_below_target(self, tmp_path):
        netplan = tmp_path / "etc" / "netplan"
        netplan.mkdir(parents=True)
        for name in ("50-b.yaml", "01-a.yaml", "README"):
            (netplan / name).write_text("")
        assert [
            str(netplan / "01-a.yaml"),
            str(netplan / "50-b.yaml"),
        ] == util.find_files("/etc/netplan/*.yaml", str(tmp_path))

    def test_nothing_found(self, tmp_path):
        assert [] == util.find_files("/etc/netplan/*.yaml", str(tmp_path))
