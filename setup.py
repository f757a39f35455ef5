import setuptools

# with open("README.md", "r") as fh:
#     long_description = fh.read()

setuptools.setup(
    name="smg-rgbd",
    version="0.0.1",
    author="Stuart Golodetz",
    author_email="stuart.golodetz@cs.ox.ac.uk",
    description="Paired colour and depth images for RGB-D pipelines",
    long_description="",  #long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/sgolodetz/smg-rgbd",
    packages=setuptools.find_namespace_packages(include=["smg.*"]),
    include_package_data=True,
    install_requires=[
        "matplotlib",
        "numpy",
        "open3d",
        "opencv-python"
    ],
    extras_require={
        "test": ["pytest"]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.7',
)
