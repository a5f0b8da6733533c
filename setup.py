from setuptools import setup, find_packages

setup(
    name="euro_analytics",
    version="0.3.0",
    description="EuroJackpot draw statistics and data-informed Smart Picks",
    author="Lottery Analytics Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        # Core packages
        "numpy>=1.21.0",
        "pandas>=1.3.0",
        "scipy>=1.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "black>=22.0.0",
            "flake8>=5.0.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "euro-analytics=euro_analytics.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
)
