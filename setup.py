from setuptools import setup, find_packages


setup(
    name="slip21",
    version="0.1",
    packages=find_packages(),
    description="SLIP-0021 hierarchical deterministic derivation of symmetric keys.",
    author="vercingetorx",
    install_requires=[
        "pycryptodomex>=3.23.0",
    ],
)
