"""Packaging settings."""

from codecs import open as codecs_open
from os.path import abspath, dirname, join

from setuptools import find_packages, setup

THIS_DIR = abspath(dirname(__file__))


with codecs_open(join(THIS_DIR, "README.md"), encoding="utf-8") as readfile:
    LONG_DESCRIPTION = readfile.read()


INSTALL_REQUIRES = [
    "boto3>=1.28.0,<2.0",
    "botocore>=1.31.0",  # matching boto3 requirement
    "click>=8.0",
    "coloredlogs",
    "humanfriendly",  # dependency of coloredlogs, used to detect color support
    "pydantic>=2.0,<3.0",
    "PyYAML>=5.4",
    "typing_extensions>=4.4",  # for assert_never
]

EXTRAS_REQUIRE = {
    "test": [
        "pytest>=7.0",
        "pytest-mock",
    ],
    "typing": [
        "boto3-stubs[acm,apigateway,apigatewayv2,cloudformation,route53]",
    ],
}


setup(
    name="gateway-domain-manager",
    version="1.0.0",
    description="Manage API Gateway custom domains, API mappings and Route 53 records",
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    license="Apache License 2.0",
    classifiers=[
        "Intended Audience :: Developers",
        "Topic :: Utilities",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    keywords="cli",
    packages=find_packages(exclude=("tests*",)),
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    entry_points={"console_scripts": ["domain-manager=domain_manager._cli.main:cli"]},
)
