"""
Relational table backing the job store.
"""

from sqlalchemy import BigInteger, CheckConstraint, Column, Integer, Numeric, String, Text

from jobly.domains.job.domain.entities import MAX_HANDLE_LENGTH, Job
from jobly.shared.infrastructure.database import Base


class JobModel(Base):
    """Job posting row"""
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary_non_negative"),
        CheckConstraint("equity >= 0 AND equity <= 1", name="ck_jobs_equity_range"),
    )

    # SQLite only autoincrements an INTEGER primary key
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    salary = Column(BigInteger, nullable=True)
    equity = Column(Numeric(asdecimal=False), nullable=True)
    company_handle = Column(String(MAX_HANDLE_LENGTH), nullable=False, index=True)

    def to_entity(self) -> Job:
        return Job(
            id=self.id,
            title=self.title,
            salary=self.salary,
            equity=float(self.equity) if self.equity is not None else None,
            company_handle=self.company_handle,
        )
