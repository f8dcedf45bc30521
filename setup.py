"""setup.py for msnumpress.

Pure Python: the codecs only need numpy, and the CLI renders its output
with rich.
"""

from setuptools import find_packages, setup

setup(
    name="msnumpress",
    version="0.1.0",
    description="MS-Numpress compression codecs for mass-spectrometry double arrays",
    python_requires=">=3.8",
    packages=find_packages(include=["msnumpress", "msnumpress.*"]),
    install_requires=[
        "numpy",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "msnumpress=msnumpress.__main__:main",
        ],
    },
)
