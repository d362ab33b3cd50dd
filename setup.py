from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_packages, setup


loader = SourceFileLoader("slidemodel", "./src/slidemodel/__init__.py")
slidemodel = ModuleType(loader.name)
loader.exec_module(slidemodel)

setup(
    name="slidemodel",
    version=slidemodel.__version__,  # type: ignore
    description="Generic data model for presentation slide decks.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages("src"),
    entry_points={"console_scripts": ["slidemodel=slidemodel.cli:main"]},
    install_requires=["appdirs", "cyclopts", "pydantic>=2.10", "PyYAML", "rich"],
    extras_require={
        "test": ["pytest"],
        "docs": [
            "mkdocs",
            "mkdocs-gen-files",
            "mkdocs-literate-nav",
            "mkdocstrings[python]",
        ],
    },
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
)
