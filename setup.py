from setuptools import setup, find_packages

# -------------------------------------------------
# Dependencies
# -------------------------------------------------

install_requires = [
    "numpy>=1.21",
    "PyYAML>=6.0",
    "psutil>=5.9",
]

extras_require = {
    "test": ["pytest>=7.0"],
}

# -------------------------------------------------
# Setup
# -------------------------------------------------

setup(
    name="match-clusterer",
    version="1.0.0",
    description="Diagonal clustering and chaining of exact pairwise sequence matches",
    author="Rowel Facunla",
    author_email="rowel.facunla@tip.edu.ph",
    license="MIT",
    python_requires=">=3.8",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"match_clusterer.config": ["default_config.yaml"]},
    include_package_data=True,
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "match-clusterer=match_clusterer.scripts.run_clusterer:main",
        ],
    },
    zip_safe=False,
)
