"""Tests for the merkleproof command line interface."""
import json

import pytest
from click.testing import CliRunner

from merkleproof.anchor import MerkleTree
from merkleproof.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def abcd_root():
    return MerkleTree(["a", "b", "c", "d"]).get_root()


class TestRootCommand:
    """merkleproof root"""

    def test_root_inline(self, runner, abcd_root):
        result = runner.invoke(cli, ["root", "a", "b", "c", "d"])
        assert result.exit_code == 0
        assert result.output.strip() == abcd_root

    def test_root_from_file(self, runner, abcd_root, tmp_path):
        items = tmp_path / "items.txt"
        items.write_text("a\nb\n\nc\nd\n")
        result = runner.invoke(cli, ["root", "--file", str(items)])
        assert result.exit_code == 0
        assert result.output.strip() == abcd_root

    def test_root_json(self, runner, abcd_root):
        result = runner.invoke(cli, ["root", "--json", "a", "b", "c", "d"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {"root": abcd_root, "leaves": 4, "depth": 2}

    def test_root_no_items(self, runner):
        result = runner.invoke(cli, ["root"])
        assert result.exit_code == 2
        assert "NO DATA" in result.output


class TestShowCommand:
    """merkleproof show"""

    def test_show_lists_every_layer(self, runner, abcd_root):
        result = runner.invoke(cli, ["show", "a", "b", "c", "d"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 7
        assert lines[0] == f"|- {abcd_root}"


class TestProveVerifyCommands:
    """merkleproof prove / verify"""

    def test_prove_then_verify(self, runner, abcd_root, tmp_path):
        proof_path = tmp_path / "proof.json"
        result = runner.invoke(cli, ["prove", "c", "a", "b", "c", "d", "--out", str(proof_path)])
        assert result.exit_code == 0
        document = json.loads(result.output)
        assert document["root"] == abcd_root
        assert document["proof"][0]["side"] == "RIGHT"

        result = runner.invoke(cli, ["verify", "c", "--root", abcd_root, "--proof", str(proof_path)])
        assert result.exit_code == 0
        assert "VALID" in result.output

    def test_verify_bare_list_from_stdin(self, runner):
        tree = MerkleTree(["a", "b", "c", "d", "e"])
        stdin = tree.get_proof("e").to_json()
        result = runner.invoke(cli, ["verify", "e", "--root", tree.get_root(), "--proof", "-"],
                               input=stdin)
        assert result.exit_code == 0

    def test_verify_wrong_item(self, runner, abcd_root, tmp_path):
        proof_path = tmp_path / "proof.json"
        runner.invoke(cli, ["prove", "c", "a", "b", "c", "d", "--out", str(proof_path)])
        result = runner.invoke(cli, ["verify", "a", "--root", abcd_root, "--proof", str(proof_path)])
        assert result.exit_code == 1
        assert "INVALID" in result.output

    def test_verify_malformed_proof(self, runner, abcd_root, tmp_path):
        proof_path = tmp_path / "proof.json"
        proof_path.write_text('[{"side": "SIDEWAYS", "sibling": null}]')
        result = runner.invoke(cli, ["verify", "a", "--root", abcd_root, "--proof", str(proof_path)])
        assert result.exit_code == 2
        assert "BAD PROOF" in result.output

    def test_prove_not_found(self, runner):
        result = runner.invoke(cli, ["prove", "z", "a", "b", "c", "d"])
        assert result.exit_code == 2
        assert "NOT FOUND" in result.output


class TestCliConfig:
    """Environment configuration reaches the commands."""

    def test_bad_env_encoding(self, runner, monkeypatch):
        monkeypatch.setenv("MERKLEPROOF_ENCODING", "no-such-codec")
        result = runner.invoke(cli, ["root", "a"])
        assert result.exit_code == 2

    def test_linear_scan_lookup(self, runner, monkeypatch):
        monkeypatch.setenv("MERKLEPROOF_INDEX_LOOKUP", "false")
        result = runner.invoke(cli, ["prove", "b", "a", "b"])
        assert result.exit_code == 0

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output
