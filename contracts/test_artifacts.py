#!/usr/bin/env python3
"""
Tests for contract compilation and artifact loading
"""

import os

import pytest
from unittest.mock import patch

from contracts.artifacts import ArtifactNotFoundError, compile_contracts, load_artifact, write_artifact

ABI = [{"inputs": [{"name": "router", "type": "address"}], "type": "constructor"}]


class TestArtifacts:
    """Test class for artifact files"""

    def test_write_then_load(self, tmp_path):
        path = write_artifact(str(tmp_path), "contracts/BaseCase.sol", "BaseCase", ABI, "6080")

        assert path == os.path.join(str(tmp_path), "contracts/BaseCase.sol", "BaseCase.json")
        abi, bytecode = load_artifact("BaseCase", artifacts_dir=str(tmp_path))
        assert abi == ABI
        assert bytecode == "0x6080"

    def test_missing_artifact(self, tmp_path):
        with pytest.raises(ArtifactNotFoundError, match="ProfileNFTContract") as exc_info:
            load_artifact("ProfileNFTContract", artifacts_dir=str(tmp_path))
        assert "Add its Solidity source" in str(exc_info.value)

    def test_artifact_without_bytecode(self, tmp_path):
        write_artifact(str(tmp_path), "contracts/IFace.sol", "IFace", ABI, "")
        with pytest.raises(ValueError, match="missing abi or bytecode"):
            load_artifact("IFace", artifacts_dir=str(tmp_path))


class TestCompileContracts:
    """Test class for compile_contracts"""

    @patch('contracts.artifacts.compile_files')
    def test_nothing_to_compile(self, mock_compile, tmp_path):
        assert compile_contracts(sources_dir=str(tmp_path), artifacts_dir=str(tmp_path / "out")) == []
        mock_compile.assert_not_called()

    @patch('contracts.artifacts._ensure_solc')
    @patch('contracts.artifacts.compile_files')
    def test_writes_hardhat_layout(self, mock_compile, mock_solc, tmp_path):
        sources = tmp_path / "contracts"
        sources.mkdir()
        source = sources / "BaseCase.sol"
        source.write_text("pragma solidity 0.8.20; contract BaseCase {}")
        mock_compile.return_value = {
            f"{source}:BaseCase": {"abi": ABI, "bin": "6080"},
            "/elsewhere/node_modules/@chainlink/Lib.sol:Lib": {"abi": [], "bin": ""},
        }

        written = compile_contracts(sources_dir=str(sources), artifacts_dir=str(tmp_path / "out"),
                                    import_remappings=[])

        assert written == [str(tmp_path / "out" / "contracts" / "BaseCase.sol" / "BaseCase.json")]
        mock_solc.assert_called_once_with("0.8.20")
        assert mock_compile.call_args.kwargs['solc_version'] == "0.8.20"
