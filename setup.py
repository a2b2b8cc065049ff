from setuptools import setup, find_packages

# Read requirements files
with open('requirements.txt') as f:
    core_requirements = [line for line in f.read().splitlines()
                        if line and not line.startswith('#') and not line.startswith('-r')]

with open('requirements-test.txt') as f:
    test_requirements = [line for line in f.read().splitlines()
                        if line and not line.startswith('#') and not line.startswith('-r')]

setup(
    name="tasklist",
    version="0.1.0",
    description="Local to-do list manager with a plain text task file",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=core_requirements,
    extras_require={
        "test": test_requirements,
    },
    entry_points={
        'console_scripts': [
            'tasklist=tasklist.tasks:main',
            'tasklist-menu=tasklist.menu:main',
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
    ],
)
