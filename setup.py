"""
ircodec - Philips RC5 / RC6 infrared pulse codec
Setup configuration.
"""

from pathlib import Path
from setuptools import setup, find_packages

# Read README
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding='utf-8') if readme_file.exists() else ""

# Read requirements
requirements_file = Path(__file__).parent / "requirements.txt"
requirements = []
if requirements_file.exists():
    requirements = [
        line.strip()
        for line in requirements_file.read_text(encoding='utf-8').splitlines()
        if line.strip() and not line.startswith("#")
    ]

setup(
    name="ircodec",
    version="0.1.0",
    description="RC5/RC6 infrared remote-control pulse decoder and encoder",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="ircodec Contributors",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=requirements,
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "ircodec-encode=ircodec.cli.encode:main",
            "ircodec-decode=ircodec.cli.decode:main",
        ],
    },
    extras_require={
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Home Automation",
        "Topic :: System :: Hardware",
    ],
)
