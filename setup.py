"""
Installation configuration for the QoE scoring engine
"""

import sys
from pathlib import Path

from setuptools import find_packages, setup

# Add the package to the path to import __version__
sys.path.insert(0, str(Path(__file__).parent / "qoe_engine"))
from __version__ import __version__

# README as long description
readme_file = Path(__file__).parent / "README.md"
long_description = ""
if readme_file.exists():
    long_description = readme_file.read_text(encoding="utf-8")

setup(
    name="qoe-engine",
    version=__version__,
    description="Coverage-aware Quality-of-Experience scoring for voice and data network measurements",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="QoE Engine Contributors",
    author_email="",
    license="MIT",
    packages=find_packages(include=["qoe_engine", "qoe_engine.*"]),
    package_data={
        "qoe_engine": ["config.yaml"],
    },
    include_package_data=True,
    install_requires=[
        "numpy>=1.24.0",  # NumPy 2.x compatible
        "pyyaml>=6.0,<7.0",
        "rich>=13.7.0,<15.0",
        "click>=8.1.7,<9.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "hypothesis>=6.90",
        ],
    },
    entry_points={
        "console_scripts": [
            "qoe-score=qoe_engine.cli:main",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Telecommunications Industry",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Topic :: System :: Networking :: Monitoring",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="qoe qos network voice data scoring etsi monitoring",
)
