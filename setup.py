from setuptools import setup, find_packages

setup(
    name="movingaverage",
    version="0.1.0",
    description="Bounded moving averages over timestamped samples for dashboard tiles",
    author="adamfilli",
    packages=find_packages(include=["movingaverage", "movingaverage.*"]),
    install_requires=[
        "pandas",
    ],
    extras_require={
        "plot": ["matplotlib"],
        "test": ["pytest"],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
