import pathlib
from setuptools import find_packages, setup

# Basic metadata
ROOT = pathlib.Path(__file__).parent
VERSION = "0.3.0"

# Runtime libraries pulled in by the murmure package
INSTALL_REQUIRES = [
    "httpx>=0.27",
    "certifi",
    "pydantic>=2",
    "pydantic-settings>=2",
    "python-dotenv",
    "typer>=0.9",
    "rich",
]

EXTRAS_REQUIRE = {
    "test": ["pytest>=7"],
}


setup(
    name="murmure-webhook",
    version=VERSION,
    description="Webhook delivery and history for Murmure transcriptions",
    python_requires=">=3.10",
    # Ensure the murmure package is found under src/
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    entry_points={
        "console_scripts": [
            "murmure-webhook=murmure.cli.main:app",
        ],
    },
)
