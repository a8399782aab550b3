from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="watchlist-client",
    version="0.1.0",
    # Repo convention: client code lives under `client/` and is imported as
    # top-level `domain` / `application` / `infrastructure` packages.
    package_dir={"": "client"},
    packages=find_packages(
        where="client",
        include=["domain", "domain.*", "application", "application.*", "infrastructure", "infrastructure.*"],
    ),
    python_requires=">=3.10",
    install_requires=[
        "aiohttp>=3.9",
        "pydantic>=2.10",
        "python-dotenv>=1.0",
    ],
)
