from setuptools import setup, find_packages

setup(
    name="robust_lowess",
    version="0.0.1",
    description="Robust locally weighted scatterplot smoothing (LOWESS).",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"robust_lowess": ["data/*.csv"]},
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "scipy",
        "scikit-learn",
    ],
    extras_require={
        "test": ["pytest"],
        # comparison against R's lowess
        "R": ["rpy2"],
    },
)
