from setuptools import setup, find_packages

setup(
    name="mind2doc",
    version="0.1.0",
    description="Export mind maps as JSON snapshots, Markdown outlines and plan-feature documents",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
        "markdown-it-py",
        "python-slugify",
        "rich",
        "toml",
    ],
    extras_require={
        "dev": ["pytest"],
    },
    entry_points={"console_scripts": ["mind2doc=mind2doc.main:main"]},
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3.11",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: POSIX :: Linux",
        "Operating System :: MacOS",
    ],
)
