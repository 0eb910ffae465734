from typing import Any, Dict, List, Optional

from pymongo.database import Database


class MongoRepository:
    def __init__(self, database: Database, collection_name: str = "devs"):
        # 🔗 el handle de la base se inyecta; no hay conexión global
        self.col = database[collection_name]

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.col.insert_one(data)
        return data

    def find_one(self, _id: str) -> Optional[Dict[str, Any]]:
        return self.col.find_one({"_id": _id})

    def find(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        # se consume el cursor completo: un error a mitad de camino se propaga
        return list(self.col.find(query))

    def count(self, query: Optional[Dict[str, Any]] = None) -> int:
        return self.col.count_documents(query or {})
