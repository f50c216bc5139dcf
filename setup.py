from setuptools import find_packages, setup

setup(
    name="urbanvitality",
    packages=find_packages(include=["ui", "ui.*"], exclude=["ui.tests"]),
    package_data={"ui.backend": ["recorded/*.json"]},
    version="0.1.0",
    description="Interactive map of global urban heat risks with a green-cover what-if simulation.",
    license="MIT",
    python_requires=">=3.10",
    install_requires=[
        "gradio>=4.0",
        "requests",
        "pandas",
        "folium",
        "fastapi",
        "pydantic>=2",
        "pydantic-settings",
        "uvicorn",
    ],
    extras_require={"test": ["pytest", "httpx"]},
)
