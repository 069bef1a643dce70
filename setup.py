"""
Setup configuration for bem-classes.

Builds the bem_classes package: BEM class name generation from class
mappings such as CSS-modules name tables.
"""

from setuptools import setup, find_packages
import os


# Read version from package
def get_version():
    """Extract version from package __init__.py"""
    version_file = os.path.join(os.path.dirname(__file__), "bem_classes", "__init__.py")
    with open(version_file, "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip("\"'")
    return "0.1.0"


# Read long description from README
def get_long_description():
    """Read long description from README.md if available"""
    readme_path = os.path.join(os.path.dirname(__file__), "README.md")
    if os.path.exists(readme_path):
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return "bem-classes: BEM class name generation from class mappings"


setup(
    name="bem-classes",
    version=get_version(),
    author="bem-classes Team",
    author_email="bem-classes@example.com",
    description="BEM class name generation from class mappings",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests*", "examples*", "docs*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing :: Markup :: HTML",
    ],
    python_requires=">=3.8",
    install_requires=[
        "PyYAML>=5.4",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "black>=22.0",
            "isort>=5.0",
            "mypy>=0.900",
            "flake8>=4.0",
        ],
        "test": [
            "pytest>=6.0",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords="bem, css, css-modules, class-names, naming-convention",
)
