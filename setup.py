from setuptools import setup, find_packages

setup(
    name="signal-cycle",
    version="1.0.0",
    description="Deterministic timed traffic-light simulator with a PyGame front end",
    author="Signal-Cycle Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main", "demo"],
    python_requires=">=3.10",
    install_requires=[
        "pygame>=2.5.0",
        "numpy>=1.24.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "signal-cycle=main:main",
            "signal-cycle-demo=demo:main",
        ],
    },
)
