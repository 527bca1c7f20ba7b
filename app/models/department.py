from sqlalchemy import Column, Integer, String, Text, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Department(Base):
    __tablename__ = "departments"

    id          = Column(Integer, primary_key=True, index=True)
    name        = Column(String(100), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    location    = Column(String(100), nullable=True)
    createdAt   = Column("created_at", TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)
    updatedAt   = Column("updated_at", TIMESTAMP(timezone=True), server_default=func.now(),
                         onupdate=func.now(), nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    # Children are removed by the FK's ON DELETE CASCADE and explicitly by
    # department_service.delete_department; the ORM never nulls them out.
    employees = relationship("Employee", back_populates="department", passive_deletes=True)

    def __repr__(self):
        return f"<Department id={self.id} name={self.name}>"
