"""
Cache nom fournisseur par INN (cache-aside).

- hit  : retour immédiat, aucune requête SQL
- miss : on charge via la fonction fournie ; si trouvé on mémorise,
         si absent on NE mémorise PAS (un fournisseur créé plus tard
         doit rester découvrable)
- pas d'éviction, pas de TTL, pas d'invalidation : les entrées vivent
  autant que le process. Acceptable seulement si la table suppliers
  ne change quasiment pas pendant la vie du déploiement (risque de
  nom périmé, assumé).

Thread-safe : le verrou protège le dict mais n'est jamais tenu pendant
l'appel SQL. Deux miss simultanés sur la même clé peuvent donc charger
deux fois ; la première écriture gagne, la seconde est un no-op.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class SupplierNameCache:
    def __init__(self) -> None:
        self._names: dict[str, str] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._names)

    def __contains__(self, tax_id: str) -> bool:
        with self._lock:
            return tax_id in self._names

    def get(self, tax_id: str) -> str | None:
        with self._lock:
            return self._names.get(tax_id)

    def put(self, tax_id: str, name: str) -> str:
        """Insère si absent ; renvoie la valeur effectivement en cache."""
        with self._lock:
            return self._names.setdefault(tax_id, name)

    def get_or_load(self, tax_id: str, loader: Callable[[str], str | None]) -> str | None:
        name = self.get(tax_id)
        if name is not None:
            logger.debug("supplier name cache hit tax_id=%s", tax_id)
            return name

        logger.debug("supplier name cache miss tax_id=%s", tax_id)
        # Si loader lève (erreur SQL, annulation), rien n'est écrit pour cette clé
        name = loader(tax_id)
        if name is None:
            return None
        return self.put(tax_id, name)
