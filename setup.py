import setuptools


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()


setuptools.setup(
    name = "pagectl",
    version = "0.1",
    packages = [
        "pagectl",
    ],
    include_package_data = True,
    description = "Page ranges, jump markers and page state for paginated list controls",
    license="MIT",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords = "pagination pager page-range terminal",
    classifiers = [
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires = [
        "Click",
        "pydantic>=2",
        "typing_extensions",
        "windows-curses;platform_system=='Windows'",
    ],
    extras_require = {
        "test": [
            "pytest",
        ],
    },
    entry_points="""
        [console_scripts]
        pagectl=pagectl.cli:cli
    """,
    python_requires=">=3.10",
)
