#!/usr/bin/env python3
from setuptools import setup, find_packages

setup(
    name="spacebind",
    version="0.1.0",
    description="Bind application windows to screens and spaces, and keep them there as displays change",
    author="spacebind contributors",
    license="ISC",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=["pypubsub>=4.0"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["spacebind=spacebind.cli:main"]},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: ISC License (ISCL)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Desktop Environment :: Window Managers",
    ],
)
