from setuptools import setup, find_packages
setup(
    name="greeter",
    version="0.1",
    description="A tiny HTTP server that answers every request with the same HTML greeting",
    packages=find_packages(exclude=["test"]),
    python_requires=">=3.8",
    install_requires=[
        "twisted",
    ],
    extras_require={
        "systemd": ["systemd-python"],
        "test": ["plumbum", "requests", "pytest"],
    },
    entry_points={
        "console_scripts": [
            "greeter=greeter.__main__:run",
        ],
    },
)
