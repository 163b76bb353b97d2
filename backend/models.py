from sqlalchemy import Column, String, Integer, Text, DateTime, Index
from datetime import datetime
from database import Base


class Friend(Base):
    """
    A person in the user's address book of friends.

    Identity is the integer primary key assigned by the store on insert.
    Domain columns are all optional; partial updates only touch the
    columns present in the request.
    """
    __tablename__ = 'friends'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100))
    relationship = Column(String(50))  # e.g. 'college', 'work', 'neighbour'
    email = Column(String(254))
    phone_number = Column(String(32))
    notes = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index('idx_friends_name', 'name'),
    )

    def __repr__(self):
        return f"<Friend id={self.id} name={self.name!r}>"
