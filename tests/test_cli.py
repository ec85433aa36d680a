from __future__ import annotations

import json
from pathlib import Path

import pytest

from pyuci import cli

NETWORK = """\
config interface 'lan'
\toption proto 'static'
\tlist dns '1.1.1.1'
\tlist dns '9.9.9.9'

config switch
\toption name 'switch0'
"""


@pytest.fixture
def cfg_dir(tmp_path: Path) -> Path:
    (tmp_path / "network").write_text(NETWORK, encoding="utf-8")
    return tmp_path


def run(cfg_dir: Path, *argv: str) -> int:
    return cli.main(["--dir", str(cfg_dir), *argv])


def test_show(cfg_dir: Path, capsys: pytest.CaptureFixture[str]):
    assert run(cfg_dir, "show", "network") == 0
    assert capsys.readouterr().out == NETWORK


def test_show_json(cfg_dir: Path, capsys: pytest.CaptureFixture[str]):
    assert run(cfg_dir, "show", "network", "--as", "json") == 0
    data = json.loads(capsys.readouterr().out)
    assert data["lan"]["dns"] == ["1.1.1.1", "9.9.9.9"]
    assert data["@switch[0]"][".type"] == "switch"


def test_get(cfg_dir: Path, capsys: pytest.CaptureFixture[str]):
    assert run(cfg_dir, "get", "network.lan") == 0
    assert capsys.readouterr().out.strip() == "interface"
    assert run(cfg_dir, "get", "network.lan.dns") == 0
    assert capsys.readouterr().out.strip() == "1.1.1.1 9.9.9.9"
    assert run(cfg_dir, "get", "network.@switch[0].name") == 0
    assert capsys.readouterr().out.strip() == "switch0"


def test_get_missing(cfg_dir: Path, capsys: pytest.CaptureFixture[str]):
    assert run(cfg_dir, "get", "network.lan.mtu") == 1
    assert "not found" in capsys.readouterr().err
    assert run(cfg_dir, "get", "network.wan") == 1


def test_usage_errors(cfg_dir: Path, capsys: pytest.CaptureFixture[str]):
    assert run(cfg_dir, "get", "network") == 2
    assert run(cfg_dir, "get", "missing.lan") == 2
    assert run(cfg_dir, "set", "network.lan.proto") == 2
    assert run(cfg_dir, "get", "network.@switch.name") == 2
    capsys.readouterr()


def test_parse_error_exit_code(cfg_dir: Path, capsys: pytest.CaptureFixture[str]):
    (cfg_dir / "broken").write_text("option a 'b'\n", encoding="utf-8")
    assert run(cfg_dir, "show", "broken") == 2
    assert "line 1" in capsys.readouterr().err


def test_set_option_and_section(cfg_dir: Path):
    assert run(cfg_dir, "set", "network.lan.proto=dhcp") == 0
    assert run(cfg_dir, "set", "network.wan=interface") == 0
    assert run(cfg_dir, "set", "network.wan.ifname=eth1") == 0
    text = (cfg_dir / "network").read_text(encoding="utf-8")
    assert "\toption proto 'dhcp'\n" in text
    assert text.endswith("config interface 'wan'\n\toption ifname 'eth1'\n")


def test_add_and_add_list(cfg_dir: Path, capsys: pytest.CaptureFixture[str]):
    assert run(cfg_dir, "add", "network", "switch") == 0
    assert capsys.readouterr().out.strip() == "@switch[1]"
    assert run(cfg_dir, "add_list", "network.lan.dns=8.8.8.8") == 0
    assert run(cfg_dir, "get", "network.lan.dns") == 0
    assert capsys.readouterr().out.strip() == "1.1.1.1 9.9.9.9 8.8.8.8"


def test_delete(cfg_dir: Path, capsys: pytest.CaptureFixture[str]):
    assert run(cfg_dir, "delete", "network.lan.dns") == 0
    assert run(cfg_dir, "delete", "network.@switch[0]") == 0
    assert (cfg_dir / "network").read_text(encoding="utf-8") == (
        "config interface 'lan'\n\toption proto 'static'\n"
    )
    assert run(cfg_dir, "delete", "network.lan.dns") == 1
    capsys.readouterr()


def test_no_command(capsys: pytest.CaptureFixture[str]):
    assert cli.main([]) == 1
    capsys.readouterr()


def test_set_section_requires_type(cfg_dir: Path, capsys: pytest.CaptureFixture[str]):
    assert run(cfg_dir, "set", "network.wan=") == 2
    assert "section type" in capsys.readouterr().err
    assert (cfg_dir / "network").read_text(encoding="utf-8") == NETWORK
