from sqlmodel import SQLModel
from app.database import create_db_and_tables, engine

# Registra los modelos en el metadata antes de borrar
create_db_and_tables()
SQLModel.metadata.drop_all(engine)
create_db_and_tables()

print("✅ Base de datos reseteada correctamente (tablas recreadas vacías).")
