#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

import ddcdk_meta
from setuptools import find_packages, setup

setup(
    name=ddcdk_meta.__name__,
    version=ddcdk_meta.__version__,
    description="Datadog monitoring construct for AWS CDK Lambda functions",
    author="Amazon",
    license="Apache License, Version 2.0",
    python_requires=">=3.9",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_dir={"ddcdk": "ddcdk"},
    py_modules=["ddcdk_meta"],
    install_requires=[
        "aws-cdk-lib>=2.100.0,<3.0.0",
        "constructs>=10.0.0,<11.0.0",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
