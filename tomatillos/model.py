from tomatillos import db


class BaseModel(db.Model):
    __abstract__ = True

    # _id is the primary key. We'll keep it as _id everywhere.
    _id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    @classmethod
    def _filter_valid_data(cls, data):
        allowed_keys = {col.name for col in cls.__table__.columns}
        filtered_data = {}
        for key, value in data.items():
            if key in allowed_keys:
                filtered_data[key] = cls._handle_invalid_type(key, value)
        return filtered_data

    @classmethod
    def _handle_invalid_type(cls, key, value):
        if isinstance(value, (list, dict)):
            return None
        return value
