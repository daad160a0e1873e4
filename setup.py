from setuptools import setup, find_packages

with open("requirements.txt") as f:
    required = f.read().splitlines()

setup(
    name="sysloc",
    version="0.0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=required,
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["sysloc = sysloc.cli:main"]},
    python_requires=">=3.10",
    description="Validated filesystem paths, probes and library lookup",
)
