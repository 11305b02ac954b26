import os.path

from setuptools import setup

from setup_utils import parse_version, write_version_py


MAJOR = 0
MINOR = 1
MICRO = 0

IS_RELEASED = False


INSTALL_REQUIRES = [
    "attrs >= 19.2.0",
    "PyYAML >= 5.1",
]

EXTRAS_REQUIRE = {
    "test": [
        "pytest",
    ],
}

PACKAGES = [
    "sateval",
    "sateval.scripts",
    "sateval.scripts.tests",
    "sateval.tests",
    "sateval.utils",
    "sateval.utils.tests",
]

PACKAGE_DATA = {
    "sateval.tests": ["scenarios/*.yaml"],
}


if __name__ == "__main__":
    version_file = os.path.join("sateval", "_version.py")
    write_version_py(version_file, MAJOR, MINOR, MICRO, IS_RELEASED)
    version = parse_version(version_file)

    setup(
        name='sateval',
        version=version,
        description='Evaluate SAT instances against partial assignments',
        packages=PACKAGES,
        package_data=PACKAGE_DATA,
        install_requires=INSTALL_REQUIRES,
        extras_require=EXTRAS_REQUIRE,
        python_requires='>=3.6',
        entry_points={
            "console_scripts": [
                "sateval-evaluate=sateval.scripts.evaluate:main",
            ],
        },
    )
