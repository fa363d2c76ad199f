import setuptools

setuptools.setup(
  name="rasterlabel",
  version="1.0.0",
  description="Single pass connected component labeling of 2D binary images.",
  python_requires=">=3.8",
  packages=["rasterlabel", "rasterlabel_cli"],
  install_requires=[
    "numpy",
    "click",
  ],
  extras_require={
    "test": [
      "pytest",
      "connected-components-3d",
    ],
  },
  entry_points={
    "console_scripts": [
      "rasterlabel=rasterlabel_cli:main"
    ],
  },
)
