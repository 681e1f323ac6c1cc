# setup.py
"""Setup script for the Roll Library."""

import os

from setuptools import setup, find_packages

setup(
    name="roll-library",
    version="1.0.0",
    description="Scanned film roll browser with a validated cache of downsized display images",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="Roll Library Team",
    packages=find_packages(exclude=["roll_library.tests", "roll_library.tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "Pillow>=9.4.0",
        "tqdm>=4.50.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0.0",
            "pytest-cov>=2.10.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "roll-library=roll_library.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Multimedia :: Graphics",
    ],
)
