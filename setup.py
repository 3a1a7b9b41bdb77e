# setup.py
from setuptools import setup, find_packages

setup(
    name="minilisp",
    version="0.0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"minilisp": ["reader/*.lark"]},
    python_requires=">=3.10",
    install_requires=[
        "lark>=1.1",
        "loguru>=0.7",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["minilisp=minilisp.repl:main"],
    },
    zip_safe=False,
)
