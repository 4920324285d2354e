from setuptools import find_packages, setup

setup(
    name="curl2vro",
    version="1.0.0",
    description="Convert curl commands to vRealize Orchestrator JavaScript code",
    license="MIT",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "docopt >= 0.6.2",
        "typing_extensions >= 4.10",
    ],
    extras_require={
        "test": [
            "pytest >= 7",
        ],
    },
    entry_points={
        "console_scripts": [
            "curl2vro = curl2vro.__main__:main",
        ],
    },
)
