"""Entry point for skillwisp-stats."""
import argparse
import logging
from pathlib import Path

from rich.console import Console

from skillwisp_stats.config import DEFAULT_CONFIG_NAME, load_config, resolve_path
from skillwisp_stats.manifests import load_registry
from skillwisp_stats.reconcile import reconcile
from skillwisp_stats.report import StatsReport, build_summary, dump_summary
from skillwisp_stats.rewriter import update_stats_in_file
from skillwisp_stats.scanner import scan_skills
from skillwisp_stats.stats import build_stats

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skillwisp-stats",
        description="Sync skill statistics with the skills/ directory",
    )
    parser.add_argument("--root", default=".", help="Repository root (defaults to CWD)")
    parser.add_argument("--config", default=None, help=f"Config file (defaults to <root>/{DEFAULT_CONFIG_NAME})")
    parser.add_argument("--fix", action="store_true", help="Update counts in documentation files")
    parser.add_argument(
        "--i18n", "--all", dest="i18n", action="store_true",
        help="Require registry checks; warn if the registry directory is missing",
    )
    parser.add_argument("--registry", default=None, help="CLI registry directory (overrides config)")
    parser.add_argument("--locale", default=None, help="Translation catalog locale (overrides config)")
    parser.add_argument("--yaml", action="store_true", help="Print a YAML summary instead of the report")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    root = Path(args.root).resolve()
    config_path = Path(args.config) if args.config else root / DEFAULT_CONFIG_NAME
    settings = load_config(config_path)["stats"]

    skills_dir = resolve_path(root, settings["skills_dir"])
    registry_dir = resolve_path(root, args.registry or settings["registry_dir"])
    locale = args.locale or settings["locale"]
    docs = [resolve_path(root, d) for d in settings["docs"]]

    scan = scan_skills(skills_dir, marker=settings["source_marker"], skill_file=settings["skill_file"])
    stats = build_stats(scan)

    result = None
    if registry_dir.is_dir():
        registry = load_registry(registry_dir, locale, marker=settings["source_marker"])
        result = reconcile(scan, registry, skills_dir, skill_file=settings["skill_file"])
    else:
        logger.debug("Registry directory %s not found, skipping registry checks", registry_dir)

    outcomes = {}
    if args.fix:
        for doc in docs:
            outcomes[_display_path(doc, root)] = update_stats_in_file(doc, stats.total_count, stats.source_count)

    console = Console(highlight=False)
    if args.yaml:
        summary = build_summary(stats, result)
        if outcomes:
            summary["documents"] = {path: outcome.value for path, outcome in outcomes.items()}
        console.print(dump_summary(summary), end="", markup=False, emoji=False, soft_wrap=True)
        return 0

    report = StatsReport(locale=locale, marker=settings["source_marker"])
    console.print("\n📊 SkillWisp Stats Sync\n", style="cyan", markup=False)
    console.print(report.render_stats(stats), soft_wrap=True)

    if result is not None:
        console.print(report.render_registry(result, stats.total_count), soft_wrap=True)
    elif args.i18n:
        console.print(f"⚠ Registry not found: {registry_dir}\n", style="yellow", markup=False, soft_wrap=True)

    if not args.fix:
        console.print("Run with --fix to update documentation files.\n", style="dim")
        return 0

    console.print(report.render_rewrites(outcomes), soft_wrap=True)
    console.print("✅ Sync complete!\n", style="green")
    return 0


def _display_path(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    raise SystemExit(main())
