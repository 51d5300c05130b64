import re
from pathlib import Path

from setuptools import find_packages, setup

PACKAGE_NAME = "nl_court_docket"
HERE = Path(__file__).parent.absolute()


def find_version(*paths: str) -> str:
    with HERE.joinpath(*paths).open("tr") as fp:
        version_file = fp.read()
    version_match = re.search(
        r"^__version__ = ['\"]([^'\"]*)['\"]", version_file, re.M
    )
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


setup(
    name=PACKAGE_NAME,
    version=find_version(PACKAGE_NAME, "__init__.py"),
    packages=find_packages(exclude=["tests"]),
    description="A Python utility to scrape the daily court docket for Newfoundland and Labrador provincial courts",
    license="MIT",
    python_requires=">=3.8",
    install_requires=[
        "beautifulsoup4>=4.9.1",
        "desert",
        "loguru",
        "marshmallow>=3",
        "pandas>=1.5",
        "requests",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "nl-court-docket=nl_court_docket.__main__:main",
        ]
    },
)
