import re
from pathlib import Path

import setuptools

with open(Path(__file__).parent / "darwin_v7" / "version" / "__init__.py", "r") as f:
    content = f.read()
    version = re.search(r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]', content).group(1)  # type: ignore

with open("README.md", "rb") as f:
    long_description = f.read().decode("utf-8")

setuptools.setup(
    name="darwin-v7",
    version=version,
    author="darwin-v7 contributors",
    description="Annotation models and import/export client for the V7 Darwin platform",
    long_description=long_description,
    long_description_content_type="text/markdown",
    setup_requires=["wheel", "setuptools"],
    install_requires=[
        "orjson",
        "pydantic>=2.0",
        "pyyaml>=5.1",
        "requests",
    ],
    extras_require={
        "test": ["responses", "pytest"],
        "dev": ["black", "flake8", "isort", "mypy", "responses", "pytest"],
    },
    packages=[
        "darwin_v7",
        "darwin_v7.core",
        "darwin_v7.core.items",
        "darwin_v7.core.types",
        "darwin_v7.data_objects",
        "darwin_v7.json",
        "darwin_v7.version",
    ],
    classifiers=["Programming Language :: Python :: 3", "License :: OSI Approved :: MIT License"],
    python_requires=">=3.8",
)
