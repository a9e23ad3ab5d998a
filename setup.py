import setuptools

setuptools.setup(
    name="groundstation-cli",
    description="Interactive client for submitting tracking jobs to a ground station API",
    version="0.1.0",
    author="Ground Station Operations",
    python_requires=">=3.10",
    packages=setuptools.find_namespace_packages(include=["groundstation", "groundstation.*"]),
    package_data={"groundstation": ["logging/logging_config.json"]},
    install_requires=[
        "aiohttp",
        "yarl",
        "pytz",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "groundstation=groundstation.operators.jobs.cli:main",
        ],
    },
)
