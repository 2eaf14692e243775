# setup.py
from setuptools import setup, find_packages

setup(
    name="psi",
    version="0.1.0",
    description="psi: a small LISP-like expression REPL with a language server",
    packages=find_packages(include=["psi", "psi.*", "psi_lsp", "psi_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "psi=psi.__main__:main",
            "psi-ls=psi_lsp.server:main",
        ],
    },
    zip_safe=False,
)
