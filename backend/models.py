from sqlalchemy import Column, Integer, String, Text, Boolean, CheckConstraint, Index

from database import Base


class Tutorial(Base):
    """
    A tutorial record.

    Ids are assigned by the database on insert. Titles are free text;
    `published` defaults to False for new tutorials.
    """
    __tablename__ = 'tutorials'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    published = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        CheckConstraint("title != ''", name='ck_tutorials_title_not_empty'),
        Index('idx_tutorials_published', 'published'),
    )

    def __repr__(self):
        return f"<Tutorial id={self.id} title={self.title!r} published={self.published}>"
