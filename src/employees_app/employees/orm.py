from ..core.constants import ACCOUNT_NUMBER_MAX_LENGTH, NAME_MAX_LENGTH
from ..extensions import db


class EmployeeRow(db.Model):
    __tablename__ = 'employees'
    # ids are never reused after a delete
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(NAME_MAX_LENGTH), nullable=False)
    age = db.Column(db.Integer, nullable=False)
    account_number = db.Column(db.String(ACCOUNT_NUMBER_MAX_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"<EmployeeRow id={self.id} name={self.name!r}>"
