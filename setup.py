#!/usr/bin/env python
# -*- encoding: utf-8 -*-

from setuptools import find_packages
from setuptools import setup

requirements = [
    r.strip() for r in open("requirements.txt") if r.strip() and not r.strip().startswith("#")
]

desc = "Parse, validate, normalize and build Package URLs (purls)."

setup(
    name="purlcode",
    version="1.0.0",
    license="Apache-2.0",
    description=desc,
    long_description=desc,
    author="AboutCode and others",
    author_email="info@aboutcode.org",
    url="https://github.com/aboutcode-org/purlcode",
    packages=find_packages(include=["purlcode", "purlcode.*"]),
    package_data={"purlcode": ["data/npm/*.yml"]},
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.8",
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
        "Topic :: Utilities",
    ],
    keywords=[
        "open source",
        "purl",
        "package-url",
        "package",
    ],
    install_requires=requirements,
    extras_require={
        "testing": [
            "pytest",
        ],
    },
)
