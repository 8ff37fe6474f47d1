from setuptools import setup, find_packages

setup(
    name="handrange-cli",
    version="1.0.0",
    packages=find_packages(exclude=["tests"]),
    package_data={"handrange": ["data/*.json"]},
    install_requires=[
        "click>=8.0",
        "rich>=13.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "handrange=handrange.cli:main",
        ],
    },
    python_requires=">=3.11",
)
