from setuptools import setup, find_packages

setup(
    name="abandoned-tracker",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["replay_detections"],
    install_requires=[
        "numpy>=1.24.2",
        "scipy>=1.10.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.7",
    description="Blob tracking with stationary (abandoned) object alarms",
    author="Patrick",
)
