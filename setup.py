from setuptools import setup, find_packages
import os

setup(
    name="VECtools",
    version="0.1.0",
    description="Single-precision 2D, 3D and 4D vector algebra (JIT compiled core)",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(include=["VECtools", "VECtools.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Multimedia :: Graphics",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        # Core scientific computing dependencies
        "numpy>=1.20.0",
        # JIT compilation of the core vector kernels
        "numba>=0.56.0",
    ],
    extras_require={
        # Test suite
        "test": [
            "pytest>=7.0",
        ],
    },
    zip_safe=False,
)
