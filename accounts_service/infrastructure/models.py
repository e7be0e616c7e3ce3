from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import String, Integer

class Base(DeclarativeBase): pass

class AccountORM(Base):
    __tablename__ = "accounts"
    id: Mapped[int] = mapped_column("user_id", Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    role: Mapped[str] = mapped_column(String(32), nullable=False, default="student", server_default="student")
    password_hash: Mapped[str | None] = mapped_column("password", String(255), nullable=True)

    def __repr__(self) -> str:
        return f"AccountORM(id={self.id!r}, email={self.email!r})"
