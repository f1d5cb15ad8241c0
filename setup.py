"""
Setup.py for cpmrm.
"""

import ast
import os

from setuptools import setup

INSTALL_REQUIREMENTS = [
    "pyte",  # renders the headless console
]
TEST_REQUIREMENTS = [
    "pytest",
    "flake8>=3.7.9",
]


RM_DIR = os.path.dirname(os.path.abspath(__file__))
CORE_PATH = os.path.join(RM_DIR, "core.py")


def get_rm_version(corepath):
    """
    Find and return the current rm version.
    :param corepath: path to the 'core.py' file in the project root directory
    :type corepath: str
    :return: the version defined in the corepath
    :rtype: str
    """
    with open(corepath, "r") as fin:
        for line in fin:
            if line.startswith("__version__"):
                version = ast.literal_eval(line.split("=")[1].strip())
                return version
    raise Exception("Could not find the version in file '{f}'".format(f=corepath))


setup(
    name="cpmrm",
    version=get_rm_version(CORE_PATH),
    description="Unix style rm for CP/M drives",
    packages=[
        "cpmrm",
        "cpmrm.bin",
        "cpmrm.lib",
        "cpmrm.lib.cpmfs",
        "cpmrm.system",
    ],
    package_dir={
        "cpmrm": ".",
    },
    scripts=["launch_rm.py"],
    zip_safe=False,
    python_requires=">=3.7",
    install_requires=INSTALL_REQUIREMENTS,
    extras_require={
        "testing": TEST_REQUIREMENTS,
    },
)
