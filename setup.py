from setuptools import find_namespace_packages, setup

extras_require = {
    "dev": [
        "black==23.3.0",
        "flake8==6.1.0",
        "Flake8-pyproject==1.2.3",
        "isort==5.12.0",
        "mypy==1.5.1",
        "pytest-cov==4.1.0",
        "pytest==7.4.4",
    ],
}

setup(
    name="saudi-id",
    packages=find_namespace_packages(where="src"),
    version="0.1.0",
    package_dir={"": "src"},
    package_data={
        "saudi_id": ["py.typed"],
    },
    description="Validate and generate Saudi Arabian national ID numbers",
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0.0,<3.0.0",
        "pydantic-settings>=2.4.0,<3.0.0",
        "sentry-sdk>=1.39.1",
    ],
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "saudi-id=saudi_id.cli:main",
        ],
    },
    test_suite="tests",
)
