from setuptools import setup, find_namespace_packages

setup(
    name="rsa-keyconv",
    version="0.1.0",
    packages=find_namespace_packages(include=["rsa_keyconv", "rsa_keyconv.*"], exclude=["*.__pycache__"]),
    install_requires=[
        "pyyaml",
        "typer",
        "cryptography",
        "pyasn1",
        "pyasn1-modules",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "rsa-keyconv = rsa_keyconv.cli.main:main",
            "rsa_keyconv = rsa_keyconv.cli.main:main"
        ]
    },
)
