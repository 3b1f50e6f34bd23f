import setuptools

setuptools.setup(
    name="ski",
    version="0.1.0",
    description="Combinatory logic interpreter for SKI, Iota and Jot",
    packages=setuptools.find_packages(include=["ski", "ski.*"]),
    package_data={"ski": ["testdata/*.txt"]},
    python_requires=">=3.7",
    install_requires=["parsable"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["ski=ski.__main__:parsable"]},
)
