from pathlib import Path
from setuptools import find_packages, setup

HERE = Path(__file__).parent


def _read_version() -> str:
    for line in (HERE / "src" / "dumptext" / "__init__.py").read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/dumptext/__init__.py")


setup(
    name="dumptext",
    version=_read_version(),
    description="Extract plain text from a tree of documents and concatenate it into one file",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["dumptext = dumptext.cli:main"]},
)
