# setup.py
from setuptools import setup, find_packages

setup(
    name="egg",
    version="0.1.0",
    description="Egg: a tiny expression language with a recursive-descent parser and tree-walking evaluator",
    python_requires=">=3.10",
    packages=find_packages(include=["egg", "egg.*", "egg_lsp", "egg_lsp.*"]),
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "egg=egg.cli:main",
            "egg-ls=egg_lsp.server:main",
            "egg-repl-server=egg_lsp.repl_server:main",
        ],
    },
    zip_safe=False,
)
