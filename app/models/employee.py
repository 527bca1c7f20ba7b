from sqlalchemy import Column, Integer, String, Numeric, Date, ForeignKey, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Employee(Base):
    __tablename__ = "employees"

    id           = Column(Integer, primary_key=True, index=True)
    firstName    = Column("first_name", String(50), nullable=False)
    lastName     = Column("last_name", String(50), nullable=False)
    email        = Column(String(255), unique=True, nullable=False, index=True)
    phone        = Column(String(30), nullable=True)
    position     = Column(String(100), nullable=True)
    salary       = Column(Numeric(12, 2, asdecimal=True), nullable=True)
    hireDate     = Column("hire_date", Date, nullable=True)
    departmentId = Column("department_id", Integer,
                          ForeignKey("departments.id", ondelete="CASCADE"),
                          nullable=True, index=True)   # NULL = unassigned
    createdAt    = Column("created_at", TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)
    updatedAt    = Column("updated_at", TIMESTAMP(timezone=True), server_default=func.now(),
                          onupdate=func.now(), nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    department = relationship("Department", back_populates="employees")

    def __repr__(self):
        return f"<Employee id={self.id} email={self.email} departmentId={self.departmentId}>"
