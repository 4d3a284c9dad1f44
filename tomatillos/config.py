import os
from dotenv import load_dotenv, find_dotenv

env_path = find_dotenv()
load_dotenv(env_path)


class Config:
    DEBUG = os.environ.get("DEBUG", "True").lower() in ["true", "1"]
    SECRET_KEY = os.environ.get("SECRET_KEY", "mysecretkey")

    # Relative sqlite paths end up in the Flask instance folder
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "SQLALCHEMY_DATABASE_URI", "sqlite:///tomatillos.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = os.environ.get(
        "SQLALCHEMY_ECHO", "False").lower() in ["true", "1"]
