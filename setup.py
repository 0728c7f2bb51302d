from setuptools import setup, find_packages

setup(
    name="cirqbuf",
    version="0.0.1",
    packages=find_packages(exclude=("test", "test.*")),
    description="Fixed-capacity ring buffer over caller-owned memory",
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
)
