from setuptools import find_packages, setup


setup(
    name="shapes-demo",
    version="0.1.0",
    description="Load shapes from a text file, sort them by area, and print summary totals.",
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    install_requires=[],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "sphinx_rtd_theme"],
    },
    entry_points={
        "console_scripts": ["shapes-demo=shapes_demo.main:main"],
    },
    python_requires=">=3.10",
)
