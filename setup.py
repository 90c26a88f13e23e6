"""
Setup script for FlipDoc.

This script configures the package for installation via pip.
Supports both development and production installations.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README for long description
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding='utf-8')

setup(
    name="flipdoc",
    version="0.1.0",
    description="Convert plain text, JPG/PNG images and Word documents into paginated PDF files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="FlipDoc Contributors",
    author_email="",
    packages=find_packages(include=["flipdoc", "flipdoc.*"]),
    install_requires=[
        "fastapi>=0.110.0",
        "python-multipart>=0.0.9",
        "pydantic>=2.0.0",
        "uvicorn>=0.23.0",
        "pypdf>=3.0.0",
        "python-docx>=1.1.0",
        "reportlab>=4.0.0",
        "Pillow>=10.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "httpx>=0.24.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "flipdoc=flipdoc.cli:main",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Office/Business",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: OS Independent",
        "Environment :: Web Environment",
    ],
    keywords="pdf text image docx word convert layout pagination",
    license="MIT",
    include_package_data=True,
    zip_safe=False,
)
