#!/usr/bin/env python
"""
Setup script for Photo Sidebar
"""

from setuptools import setup, find_packages

setup(
    name="photosidebar",
    version="1.1.0",
    description="Dockable thumbnail sidebar for an external image folder",
    author="Photo Sidebar Contributors",
    license="BSD-2-Clause",
    package_dir={"": "src/python"},
    packages=find_packages("src/python"),
    python_requires=">=3.8",
    install_requires=[
        "Pillow>=9.0.0",
        "PySide6>=6.5.0",
        "watchdog>=3.0.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "photosidebar=photosidebar.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
)
