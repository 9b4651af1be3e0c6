#!/usr/bin/env python3
"""
Phosphor Elm Generator

Refreshes the phosphor-icons/core submodule, converts every icon's six weights
into elm/svg code and writes the Phosphor module plus a demo page.

Usage:
    python generate_icons.py [--skip-submodule] [--assets-path DIR] [--catalog FILE]
                             [--layout {auto,weight,icon}] [--limit N]
                             [--output FILE] [--demo-output FILE]

Examples:
    # Full run: update submodule, regenerate src/Phosphor.elm and example/src/Test.elm
    python generate_icons.py

    # Regenerate from the current checkout without touching git
    python generate_icons.py --skip-submodule

    # Only the first 10 icons of the catalog (useful for testing)
    python generate_icons.py --skip-submodule --limit 10
"""

import argparse
import logging
import os
import subprocess
import sys
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import config
import otel_config
from catalog import CatalogError, IconCatalogEntry, catalog_from_names, load_catalog
from demo_page import assemble_demo_page
from elm_renderer import render_element
from icon_loader import LAYOUTS, BadWeightFolderError, IconRecord, check_weights, load_icons, missing_weights
from module_assembler import GeneratedIcon, assemble_module
from svg_processor import MalformedIconError, SVGParseError, parse_svg, sanitize_svg

logger = logging.getLogger(__name__)

USE_COLOR = sys.stdout.isatty() and not os.getenv("NO_COLOR")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SubmoduleUpdateError(Exception):
    """The git submodule holding the icon sources could not be refreshed"""


class OutputWriteError(Exception):
    """A generated file could not be written"""


@dataclass
class RunResult:
    icons: List[GeneratedIcon] = field(default_factory=list)
    passes: int = 0
    fails: int = 0

    @property
    def names(self) -> List[str]:
        return [icon.entry.camel_name for icon in self.icons]


def _paint(text: str, code: str) -> str:
    if not USE_COLOR:
        return text
    return f"\033[{code}m{text}\033[0m"


def report_ok(message: str) -> None:
    print(f"{_paint('✓', '32')} {message}")


def report_fail(message: str, detail: Optional[str] = None) -> None:
    print(f"{_paint('✗', '31')} {message}", file=sys.stderr)
    if detail:
        print(f"    {detail}", file=sys.stderr)


def update_submodule(cwd: Path = config.ROOT_DIR) -> None:
    """
    Update the icon source submodule to its remote head.

    Raises:
        SubmoduleUpdateError: git is missing or exited non-zero
    """
    try:
        subprocess.run(
            config.SUBMODULE_UPDATE_COMMAND,
            cwd=cwd,
            check=True,
            capture_output=True,
            text=True
        )
    except subprocess.CalledProcessError as e:
        raise SubmoduleUpdateError(e.stderr.strip() or str(e)) from e
    except OSError as e:
        raise SubmoduleUpdateError(str(e)) from e


def generate_icon(entry: IconCatalogEntry, record: IconRecord) -> Optional[GeneratedIcon]:
    """
    Sanitize, parse and render all six weights of one icon.

    Returns None (after reporting why) if a weight is missing or any weight
    fails to parse; the icon is then left out of the output entirely.
    """
    name = entry.camel_name

    if not check_weights(record):
        missing = ", ".join(weight.value for weight in missing_weights(record))
        report_fail(f"{name} is missing weights", missing or None)
        return None

    elements = {}
    for weight, svg_content in record.items():
        try:
            svg = parse_svg(sanitize_svg(svg_content))
        except MalformedIconError as e:
            report_fail(f"{name} is malformed ({weight.value})", str(e))
            continue
        except SVGParseError as e:
            report_fail(f"{name} could not be parsed ({weight.value})", str(e))
            continue
        elements[weight] = render_element(svg)

    if len(elements) != len(record):
        return None
    return GeneratedIcon(entry=entry, elements=elements)


def generate_components(
    catalog: Sequence[IconCatalogEntry],
    icons: dict,
    limit: Optional[int] = None
) -> RunResult:
    """Run every cataloged icon through the pipeline, in catalog order"""
    result = RunResult()
    if limit and limit > 0:
        catalog = catalog[:limit]

    for entry in catalog:
        with otel_config.tracer.start_as_current_span("generate_icon", attributes={"icon.name": entry.name}) as span:
            generated = generate_icon(entry, icons.get(entry.name, {}))
            span.set_attribute("icon.generated", generated is not None)

        if generated is None:
            result.fails += 1
            otel_config.icons_failed_counter.add(1)
            continue

        result.icons.append(generated)
        result.passes += 1
        otel_config.icons_generated_counter.add(1)
        report_ok(f"DONE {entry.camel_name}")

    return result


def write_outputs(outputs: Sequence[Tuple[Path, str]]) -> None:
    """
    Write generated files all-or-nothing.

    Each file is first written to a temporary file beside its target. Targets
    are replaced only once every temporary file is complete, so a failure
    leaves all previous outputs untouched.

    Raises:
        OutputWriteError: a directory or temporary file could not be written
    """
    staged: List[Tuple[str, Path]] = []
    try:
        for path, content in outputs:
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                with tempfile.NamedTemporaryFile(
                    'w', encoding='utf-8', dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
                ) as f:
                    staged.append((f.name, path))
                    f.write(content)
            except OSError as e:
                raise OutputWriteError(f"{path}: {e}") from e

        for temp_name, path in staged:
            try:
                os.replace(temp_name, path)
            except OSError as e:
                raise OutputWriteError(f"{path}: {e}") from e
    finally:
        for temp_name, _ in staged:
            if os.path.exists(temp_name):
                os.unlink(temp_name)


def _plural(count: int) -> str:
    return f"{count} component{'s' if count != 1 else ''}"


def print_summary(result: RunResult) -> None:
    if result.passes > 0:
        print(_paint(f"{_plural(result.passes)} generated", '32'))
    if result.fails > 0:
        print(_paint(f"{_plural(result.fails)} failed", '31'))


def resolve_catalog_path(catalog_arg: Optional[str]) -> Optional[Path]:
    if catalog_arg:
        return Path(catalog_arg)
    if config.CATALOG_PATH.is_file():
        return config.CATALOG_PATH
    return None


def run(args: argparse.Namespace) -> RunResult:
    """
    Execute the pipeline. Fatal errors propagate to main().

    Raises:
        SubmoduleUpdateError, CatalogError, BadWeightFolderError,
        OutputWriteError, OSError (unreadable icon sources)
    """
    if not args.skip_submodule:
        update_submodule()
        report_ok("Updated submodule @phosphor-icons/core")

    catalog_path = resolve_catalog_path(args.catalog)
    catalog = load_catalog(catalog_path) if catalog_path else None
    icons = load_icons(args.assets_path, catalog, args.layout)
    if catalog is None:
        logger.info("No catalog manifest, deriving icon names from the asset tree")
        catalog = catalog_from_names(icons.keys())

    result = generate_components(catalog, icons, args.limit)

    # Both files are written only once every icon has been processed
    module_text = assemble_module(result.icons, args.module_name)
    demo_text = assemble_demo_page(result.names, args.module_name)
    write_outputs([(Path(args.output), module_text), (Path(args.demo_output), demo_text)])

    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate the Phosphor Elm module from SVG icon sources",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        "--skip-submodule",
        action="store_true",
        help="Do not run 'git submodule update' before generating"
    )

    parser.add_argument(
        "--assets-path",
        default=str(config.ASSETS_PATH),
        help=f"Root of the SVG source tree (default: {config.ASSETS_PATH})"
    )

    parser.add_argument(
        "--catalog",
        default=None,
        help=f"JSON icon catalog (default: {config.CATALOG_PATH} if present, else the asset tree listing)"
    )

    parser.add_argument(
        "--layout",
        choices=LAYOUTS,
        default="auto",
        help="Asset tree layout: one folder per weight or one per icon (default: auto)"
    )

    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Limit processing to the first N icons of the catalog (useful for testing)"
    )

    parser.add_argument(
        "--output",
        default=str(config.INDEX_PATH),
        help=f"Generated Elm module (default: {config.INDEX_PATH})"
    )

    parser.add_argument(
        "--demo-output",
        default=str(config.TEST_PATH),
        help=f"Generated demo page (default: {config.TEST_PATH})"
    )

    parser.add_argument(
        "--module-name",
        default=config.MODULE_NAME,
        help=f"Elm module name (default: {config.MODULE_NAME})"
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.LOG_LEVEL,
        help=f"Python logging level (default: {config.LOG_LEVEL})"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    otel_config.initialize_telemetry()
    try:
        with otel_config.tracer.start_as_current_span("generate_components") as span:
            try:
                result = run(args)
            except SubmoduleUpdateError as e:
                report_fail("Could not update submodule @phosphor-icons/core", str(e))
                return 1
            except BadWeightFolderError as e:
                report_fail(str(e))
                return 1
            except CatalogError as e:
                report_fail(str(e))
                return 1
            except OutputWriteError as e:
                report_fail("Writing file failed", str(e))
                return 1
            except OSError as e:
                report_fail("Could not read icon sources", str(e))
                return 1
            span.set_attribute("icons.generated", result.passes)
            span.set_attribute("icons.failed", result.fails)
    finally:
        otel_config.shutdown()

    print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
