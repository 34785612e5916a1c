from setuptools import find_packages, setup

setup(
    name="dynamo-items",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=["boto3>=1.26.0", "botocore"],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
            "pytest-cov",
            "moto>=5.0",
        ],
        "typing": ["mypy-boto3-dynamodb"],
    },
)
