from setuptools import setup, find_packages

setup(
    name="promptline",
    version="0.1.0",
    description="A prompt-improvement form for the terminal and the browser",
    packages=find_packages(include=["promptline", "promptline.*"]),
    install_requires=[
        "boto3",
        "httpx",
        "rich",
        "prompt-toolkit",
        "google-genai",
        "pyperclip",
        "fastapi",
        "uvicorn",
        "python-multipart",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "promptline=promptline.__main__:main",
        ],
    },
    python_requires=">=3.11",
)
