from setuptools import setup, find_packages

setup(
    name="handsfree",
    version="0.1.0",
    description="Voice-controlled hands-free capture of contacts, confirmations and media",
    author="",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests*"]),
    install_requires=[
        "rich>=12.5.0",
        "pyyaml>=6.0.0",
        "pypubsub>=4.0.3",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "handsfree=handsfree.main:main",
        ],
    },
)
