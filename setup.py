from setuptools import find_packages, setup

setup(
    name="ci-log-sync",
    version="0.1.0",
    packages=find_packages(
        include=[
            "cilog_common",
            "cilog_common.*",
            "cilog_client",
            "cilog_client.*",
            "cilog_datasources",
            "cilog_datasources.*",
            "cilog_sync",
            "cilog_sync.*",
        ]
    ),
    install_requires=[
        "requests>=2.31.0",
        "click>=8.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-xdist>=3.3.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ci-logs=cilog_sync.cli:main",
        ],
    },
    python_requires=">=3.10",
)
