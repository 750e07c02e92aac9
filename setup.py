"""orderwire - Setup configuration"""

from setuptools import setup, find_packages

setup(
    name="orderwire",
    version="1.0.0",
    description="Canonical order encoding and L1 action signing for perpetuals exchanges",
    author="orderwire Team",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.1",
        "web3>=6.18.0",
        "eth-account>=0.13.0",
        "msgpack>=1.0.8",
        "httpx>=0.27.0",
        "pydantic>=2.6.1",
        "pydantic-settings>=2.1.0",
        "structlog>=24.1.0",
        "prometheus-client>=0.20.0",
        "click>=8.1.7",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-asyncio>=0.23.5",
        ],
    },
    entry_points={
        "console_scripts": [
            "orderwire=orderwire.cli.main:cli",
        ],
    },
    python_requires=">=3.11",
)
