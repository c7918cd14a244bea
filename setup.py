"""
Setup script for AWS Unused Access Analyzer
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="aws-unused-analyzer",
    version="1.0",
    author="Aswanth",
    author_email="aswanthrajan97@gmail.com",
    description="Finds unused IAM users, roles, credentials and permissions in an AWS account",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        "boto3>=1.20.0",
        "click>=8.0.0",
        "prettytable>=2.0.0",
        "colorama>=0.4.4",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "moto>=5.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "aws-unused-analyzer=aws_unused_analyzer.cli:main",
        ],
    },
)
