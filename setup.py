import setuptools

with open("README.md") as file:
    read_me_description = file.read()

setuptools.setup(name="m3fren",
        version="0.1",
        author="Infant Neuromotor Control Laboratory",
        description="Multivariate multiscale multi-frequency entropy of band-filtered signals",
        long_description=read_me_description,
        long_description_content_type="text/markdown",
        packages=setuptools.find_namespace_packages(include=['m3fren', 'm3fren.*']),
        install_requires=["numpy", "scipy", "pandas", "matplotlib"],
        extras_require={"test": ["pytest"]},
        classifiers=["Programming Language :: Python :: 3", "License :: OSI Approved :: MIT License", "Operating System :: OS Independent",],
        python_requires='>=3.10',)
