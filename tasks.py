#!/usr/bin/env python3
"""Invoke tasks for cube-lut-tiler project automation."""

import shutil
import sys
from pathlib import Path

from invoke.context import Context
from invoke.tasks import task

# Ensure UTF-8 encoding for Windows console (for emoji support)
if sys.platform == "win32":
    if sys.stdout.encoding != "utf-8":
        sys.stdout.reconfigure(encoding="utf-8")
    if sys.stderr.encoding != "utf-8":
        sys.stderr.reconfigure(encoding="utf-8")


@task
def clean(_: Context) -> None:
    """Clean build artifacts, cache files, and temporary files."""
    print("🧹 Cleaning build artifacts and cache files...")

    dirs_to_clean = [
        "build",
        "dist",
        "*.egg-info",
        ".pytest_cache",
        ".mypy_cache",
        ".ruff_cache",
        ".coverage",
        "htmlcov",
        "__pycache__",
    ]

    for pattern in dirs_to_clean:
        if "*" in pattern or pattern == "__pycache__":
            for path in Path(".").glob(f"**/{pattern}"):
                if path.is_dir():
                    print(f"  Removing directory: {path}")
                    shutil.rmtree(path, ignore_errors=True)
                elif path.is_file():
                    print(f"  Removing file: {path}")
                    path.unlink(missing_ok=True)
        elif Path(pattern).is_dir():
            print(f"  Removing directory: {pattern}")
            shutil.rmtree(pattern, ignore_errors=True)
        elif Path(pattern).is_file():
            print(f"  Removing file: {pattern}")
            Path(pattern).unlink()

    print("✅ Clean completed")


@task
def format(ctx: Context) -> None:
    """Format code with ruff."""
    print("🎨 Formatting code with ruff...")
    ctx.run("ruff format src tests docs/examples")
    print("✅ Code formatting completed")


@task
def lint(ctx: Context, fix: bool = False) -> None:
    """Run linting with ruff.

    Args:
        fix: Automatically fix fixable issues (default: False)
    """
    print("🔍 Linting code with ruff...")
    cmd = "ruff check src tests"
    if fix:
        cmd += " --fix"
        print("  Auto-fixing enabled")
    ctx.run(cmd)
    print("✅ Linting completed")


@task
def typecheck(ctx: Context) -> None:
    """Run type checking with pyright."""
    print("🔬 Type checking with pyright...")
    ctx.run("pyright src/cube_lut_tiler")
    print("✅ Type checking completed")


@task
def spell(ctx: Context, fix: bool = False) -> None:
    """Run spell checking with codespell.

    Args:
        fix: Automatically fix spelling issues (default: False)
    """
    print("📝 Spell checking with codespell...")

    cmd = "codespell src tests"
    if fix:
        cmd += " --write-changes"
        print("  Auto-fix mode enabled")

    ctx.run(cmd)
    print("✅ Spell checking completed")


@task
def check_patterns(ctx: Context) -> None:
    """Check for banned code patterns."""
    print("🔍 Checking for banned code patterns...")

    result = ctx.run("grep -r 'contextlib.suppress.*Exception' src/ || true", hide=True)
    if result is not None and result.stdout.strip():
        print("❌ Found contextlib.suppress with broad exceptions:")
        print(result.stdout)
        raise SystemExit(1)

    result = ctx.run("grep -rn 'except:' src/ || true", hide=True)
    if result is not None and result.stdout.strip():
        print("❌ Found bare except clauses:")
        print(result.stdout)
        raise SystemExit(1)

    print("✅ No banned patterns found")


@task
def reuse_annotate(ctx: Context) -> None:
    """Add SPDX license headers to source files missing them."""
    print("📜 Adding SPDX license headers to source files...")
    ctx.run(
        "reuse annotate --license BSD-3-Clause --copyright 'Fuse Technical Group' "
        "--year 2025 --style python "
        "src/**/*.py tests/*.py"
    )
    print("✅ SPDX headers added to all source files")


@task
def test(ctx: Context, coverage: bool = True, verbose: bool = False) -> None:
    """Run tests with pytest.

    Args:
        coverage: Generate coverage report (default: True)
        verbose: Run with verbose output (default: False)
    """
    print("🧪 Running tests with pytest...")

    cmd = "pytest"

    if coverage:
        cmd += " --cov=cube_lut_tiler --cov-report=term-missing --cov-report=html --cov-report=xml"

    if verbose:
        cmd += " -v"

    cmd += " tests"

    ctx.run(cmd)
    print("✅ Tests completed")


@task(pre=[format, lint, typecheck, spell, check_patterns])
def quality(_: Context) -> None:
    """Run code quality checks: format, lint, typecheck, spell check and pattern checks.

    Does NOT run tests - use 'invoke test' separately for functional testing.
    """
    print("🎯 Quality checks completed successfully!")


@task(pre=[clean])
def build(ctx: Context) -> None:
    """Build the package for distribution."""
    print("🔨 Building package...")

    ctx.run("uv build")

    print("\n📦 Built files:")
    dist_path = Path("dist")
    if dist_path.exists():
        for file in sorted(dist_path.glob("*")):
            size = file.stat().st_size
            if size > 1024 * 1024:
                size_str = f"{size / (1024 * 1024):.1f}M"
            elif size > 1024:
                size_str = f"{size / 1024:.1f}K"
            else:
                size_str = f"{size}B"
            print(f"  {file.name} ({size_str})")

    print("✅ Build completed")


@task
def install(ctx: Context, dev: bool = False, editable: bool = True) -> None:
    """Install the package.

    Args:
        dev: Install with development dependencies (default: False)
        editable: Install in editable mode (default: True)
    """
    print("📥 Installing package...")

    if dev:
        ctx.run("uv sync --extra dev")
    elif editable:
        ctx.run("uv pip install -e .")
    else:
        ctx.run("uv pip install .")
    print("✅ Installation completed")


@task
def dev_setup(ctx: Context) -> None:
    """Set up development environment."""
    print("🔧 Setting up development environment...")
    ctx.run("uv sync --extra dev")
    print("✅ Development environment setup completed")


@task
def demo(ctx: Context) -> None:
    """Run the basic usage example."""
    print("🎬 Running package demo...")

    try:
        ctx.run("python docs/examples/basic_usage.py")
    except Exception as e:
        print(f"❌ Demo failed (is the package installed?): {e}")
        return

    print("✅ Demo completed")


@task
def all(ctx: Context) -> None:
    """Run complete CI/CD pipeline: clean, quality checks, tests, and build."""
    print("🎯 Running complete CI/CD pipeline...")
    clean(ctx)
    quality(ctx)
    test(ctx)
    build(ctx)
    print("🎉 Complete pipeline finished successfully!")
