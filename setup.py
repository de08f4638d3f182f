#!/usr/bin/env python3
"""
Setup script for BidDash
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="biddash",
    version="1.0.0",
    description="Korean public procurement (G2B) bid announcement dashboard backend",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["biddash", "biddash.*"]),
    py_modules=["run", "run_http"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
        "Framework :: FastAPI",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=7.4.3",
            "pytest-asyncio>=0.21.1",
            "httpx>=0.25.0",
            "black>=23.11.0",
            "isort>=5.12.0",
            "flake8>=6.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "biddash=run:main",
        ],
    },
    keywords=[
        "procurement",
        "bidding",
        "government",
        "g2b",
        "dashboard",
        "fastapi",
    ],
)
