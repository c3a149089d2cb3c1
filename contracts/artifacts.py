"""
Compilation of the Solidity sources and loading of the resulting artifacts.

Artifacts follow the Hardhat layout so either toolchain can produce them:
``build/artifacts/contracts/<File>.sol/<ContractName>.json``.
"""

import os
import json
import glob
import logging
from typing import Any, Dict, List, Optional, Tuple

from solcx import compile_files, get_installed_solc_versions, install_solc

logger = logging.getLogger(__name__)

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SOURCES_DIR = os.path.join(PROJECT_ROOT, 'contracts')
ARTIFACTS_DIR = os.path.join(PROJECT_ROOT, 'build', 'artifacts')
SOLC_VERSION = "0.8.20"


class ArtifactNotFoundError(FileNotFoundError):
    """No compiled artifact exists for the requested contract."""


def _default_remappings() -> List[str]:
    node_modules = os.path.join(PROJECT_ROOT, 'node_modules')
    remappings = []
    for scope in ('@chainlink', '@openzeppelin'):
        if os.path.isdir(os.path.join(node_modules, scope)):
            remappings.append(f"{scope}/={os.path.join(node_modules, scope)}/")
    return remappings


def _ensure_solc(version: str):
    if version not in [str(v) for v in get_installed_solc_versions()]:
        logger.info(f"Installing solc {version}...")
        install_solc(version)


def write_artifact(artifacts_dir: str, source_name: str, contract_name: str, abi: List[Dict[str, Any]], bytecode: str) -> str:
    """Write one artifact and return its path."""
    out_dir = os.path.join(artifacts_dir, source_name)
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, f'{contract_name}.json')
    if bytecode and not bytecode.startswith('0x'):
        bytecode = '0x' + bytecode
    with open(path, 'w') as f:
        json.dump({
            "_format": "hh-sol-artifact-1",
            "contractName": contract_name,
            "sourceName": source_name,
            "abi": abi,
            "bytecode": bytecode,
        }, f, indent=2)
    return path


def compile_contracts(
    sources_dir: str = SOURCES_DIR,
    artifacts_dir: str = ARTIFACTS_DIR,
    solc_version: str = SOLC_VERSION,
    import_remappings: Optional[List[str]] = None,
) -> List[str]:
    """
    Compile every .sol file under `sources_dir` and write artifacts.

    Returns:
        Paths of the written artifacts (empty when there is nothing to compile)
    """
    sources = sorted(glob.glob(os.path.join(sources_dir, '**', '*.sol'), recursive=True))
    if not sources:
        logger.warning(f"No Solidity sources in {sources_dir}, nothing to compile")
        return []

    _ensure_solc(solc_version)
    if import_remappings is None:
        import_remappings = _default_remappings()

    compiled = compile_files(
        sources,
        output_values=["abi", "bin"],
        solc_version=solc_version,
        import_remappings=import_remappings,
        allow_paths=[PROJECT_ROOT],
    )

    written = []
    root = os.path.dirname(os.path.abspath(sources_dir))
    for contract_id, output in compiled.items():
        source_path, contract_name = contract_id.rsplit(':', 1)
        # Only artifacts for our own sources, not for imported libraries
        if not os.path.abspath(source_path).startswith(os.path.abspath(sources_dir)):
            continue
        source_name = os.path.relpath(os.path.abspath(source_path), root)
        written.append(write_artifact(artifacts_dir, source_name, contract_name, output['abi'], output['bin']))

    logger.info(f"Compiled {len(written)} Solidity contract(s)")
    return written


def load_artifact(contract_name: str, artifacts_dir: str = ARTIFACTS_DIR) -> Tuple[List[Dict[str, Any]], str]:
    """Load (abi, bytecode) of a compiled contract."""
    pattern = os.path.join(artifacts_dir, '**', f'{contract_name}.json')
    matches = [p for p in glob.glob(pattern, recursive=True) if not p.endswith('.dbg.json')]
    if not matches:
        raise ArtifactNotFoundError(
            f"Artifact for {contract_name} not found under {artifacts_dir}. "
            f"Add its Solidity source under {SOURCES_DIR} and compile the contracts first."
        )

    with open(matches[0], 'r') as f:
        data = json.load(f)
    abi = data.get('abi')
    bytecode = data.get('bytecode')
    if not abi or not bytecode or bytecode == '0x':
        raise ValueError(f"Artifact for {contract_name} is missing abi or bytecode")
    return abi, bytecode
