"""
Command line driver for SyMacros.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Dict, Any

import click
from lsprotocol.converters import get_converter

from .config import Config
from .expansion import MacroEngine, MacroContractError, ExpansionRequest, ExpansionResult


logger = logging.getLogger(__name__)


def load_requests(path: Path) -> List[ExpansionRequest]:
    """
    Load expansion requests from a JSON file holding one request or a list.

    Args:
        path: Path to the request file

    Returns:
        Requests in file order
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    items = data if isinstance(data, list) else [data]
    for item in items:
        if not isinstance(item, dict):
            raise ValueError(f"Request must be a JSON object, got {type(item).__name__}")
    return [ExpansionRequest.from_dict(item) for item in items]


def format_text_report(results: Sequence[ExpansionResult]) -> str:
    """Render generated code followed by compiler-style diagnostic lines."""
    blocks = []
    for result in results:
        lines = []
        if result.expression is not None and result.expression.text:
            lines.append(result.expression.text)
        for declaration in result.declarations:
            lines.append(declaration.text)
        for diagnostic in result.diagnostics:
            lines.append(diagnostic.format())
        blocks.append(f"// {result.macro}\n" + "\n\n".join(lines) if lines else f"// {result.macro}")
    return "\n\n".join(blocks)


def format_json_report(results: Sequence[ExpansionResult]) -> str:
    """Render results as a JSON document, LSP diagnostics included."""
    converter = get_converter()
    documents: List[Dict[str, Any]] = []
    for result in results:
        document = result.to_dict()
        document['lsp_diagnostics'] = [
            converter.unstructure(d.to_lsp_diagnostic()) for d in result.diagnostics
        ]
        documents.append(document)

    return json.dumps({
        'summary': {
            'total_requests': len(results),
            'total_errors': sum(1 for r in results for d in r.diagnostics if d.is_error),
            'total_warnings': sum(1 for r in results for d in r.diagnostics if not d.is_error),
        },
        'results': documents
    }, indent=2)


def run_expand(
    request_paths: Sequence[Path],
    config_path: Optional[Path],
    output_format: str,
    output_path: Optional[Path],
    jobs: Optional[int]
) -> int:
    """
    Expand every request found in the given files.

    Args:
        request_paths: JSON request files
        config_path: Optional configuration file
        output_format: 'text' or 'json'
        output_path: Optional file to write the report to (default: stdout)
        jobs: Optional worker count overriding the configuration

    Returns:
        Exit code (0 for success, non-zero when an error was reported)
    """
    logger.debug("Running expansion from the command line")

    config = Config()
    try:
        if config_path:
            config.load_config(config_path)
    except (OSError, ValueError) as e:
        click.echo(f"Error: cannot load configuration: {e}", err=True)
        return 1

    if jobs:
        config.options.max_workers = jobs

    requests: List[ExpansionRequest] = []
    for path in request_paths:
        try:
            requests.extend(load_requests(path))
        except (OSError, ValueError) as e:
            click.echo(f"Error: cannot load requests from {path}: {e}", err=True)
            return 1

    logger.info(f"Expanding {len(requests)} requests")

    engine = MacroEngine(config)
    try:
        results = engine.expand_all(requests)
    except MacroContractError as e:
        click.echo(f"Error: expansion aborted: {e}", err=True)
        return 1

    if output_format == 'json':
        report = format_json_report(results)
    else:
        report = format_text_report(results)

    if output_path:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(report)
        logger.info(f"Report written to {output_path}")
    else:
        click.echo(report)

    return 1 if any(result.has_errors for result in results) else 0


def run_list_macros(output_format: str, config_path: Optional[Path] = None) -> int:
    """Print the registered macros."""
    config = Config()
    if config_path:
        config.load_config(config_path)
    engine = MacroEngine(config)
    info = engine.get_macro_info()

    if output_format == 'json':
        click.echo(json.dumps(info, indent=2))
    else:
        for name, details in info.items():
            state = "enabled" if details['enabled'] else "disabled"
            click.echo(f"{name:<14} {details['kind']:<12} {state:<9} {details['description']}")
    return 0
