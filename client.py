# client.py
"""
Typed client for the building management API.

Every endpoint has a method that sends the request, checks the status and
parses the body into the same pydantic schemas the server responds with.
GET results are cached per query key; each mutation invalidates the keys
it affects, so the next read goes back to the server.

Usage:
     client = BuildingClient("https://building.example.com")
     client.login("manager1", "s3cret-pass")
     unit = client.create_unit(unit_number="101", floor=1)
     client.list_units()          # fetched
     client.list_units()          # served from cache
     client.update_unit(unit.id, status="inactive")   # invalidates "units"
"""
import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic.alias_generators import to_camel

from schemas.auth import LoginResponse
from schemas.message import MessageResponse
from schemas.payment import PaymentHistoryResponse, PaymentResponse, PaymentTransitionResponse
from schemas.unit import UnitBalanceResponse, UnitResponse
from schemas.user import UserResponse

logger = logging.getLogger(__name__)

ME_KEY = "me"
UNITS_KEY = "units"
PAYMENTS_KEY = "payments"


def messages_key(unit_id: int) -> str:
     return f"messages:{unit_id}"


def balance_key(unit_id: int) -> str:
     return f"balance:{unit_id}"


class ApiError(Exception):
     """Non-2xx response from the API."""

     def __init__(self, status_code: int, message: str):
          super().__init__(f"{status_code}: {message}")
          self.status_code = status_code
          self.message = message


class BuildingClient:
     """
     Request/response wrappers around each endpoint with a read cache.

     `session` can be any object exposing requests' `request(method, url,
     json=..., headers=...)` signature, e.g. a requests.Session or
     FastAPI's TestClient.
     """

     def __init__(self, base_url: str = "", session: Optional[Any] = None, timeout: int = 10):
          self.base_url = base_url.rstrip("/")
          self.session = session if session is not None else requests.Session()
          self.timeout = timeout
          self.token: Optional[str] = None
          self._cache: Dict[str, Any] = {}

     # ------------------------------------------------------------------
     # Plumbing
     # ------------------------------------------------------------------

     def _request(self, method: str, path: str, json: Optional[dict] = None) -> Any:
          headers = {"Content-Type": "application/json"}
          if self.token:
               headers["Authorization"] = f"Bearer {self.token}"
          kwargs = {"json": json, "headers": headers}
          if isinstance(self.session, requests.Session):
               kwargs["timeout"] = self.timeout
          response = self.session.request(method, f"{self.base_url}{path}", **kwargs)

          if response.status_code >= 400:
               message = ""
               try:
                    body = response.json()
                    message = body.get("detail") or body.get("error") or ""
               except ValueError:
                    pass
               logger.debug("%s %s failed with %s", method, path, response.status_code)
               raise ApiError(response.status_code, str(message))
          return response.json()

     def _cached(self, key: str, fetch):
          if key not in self._cache:
               self._cache[key] = fetch()
          return self._cache[key]

     def invalidate(self, *keys: str) -> None:
          for key in keys:
               self._cache.pop(key, None)

     def clear_cache(self) -> None:
          self._cache.clear()

     # ------------------------------------------------------------------
     # Auth
     # ------------------------------------------------------------------

     def login(self, username: str, password: str) -> LoginResponse:
          data = self._request("POST", "/api/auth/login", {"username": username, "password": password})
          result = LoginResponse.model_validate(data)
          self.token = result.token
          # A new identity sees different rows
          self.clear_cache()
          self._cache[ME_KEY] = result.user
          return result

     def logout(self) -> None:
          self.token = None
          self.clear_cache()

     def me(self) -> UserResponse:
          return self._cached(ME_KEY, lambda: UserResponse.model_validate(self._request("GET", "/api/auth/me")))

     def create_admin(self, name: str, username: str, password: str) -> UserResponse:
          data = self._request("POST", "/api/admins/create", {
               "name": name,
               "username": username,
               "password": password,
               "role": "building_admin",
          })
          return UserResponse.model_validate(data)

     def create_resident(self, name: str, username: str, password: str, unit_id: int) -> UserResponse:
          data = self._request("POST", "/api/residents/create", {
               "name": name,
               "username": username,
               "password": password,
               "role": "resident",
               "unitId": unit_id,
          })
          return UserResponse.model_validate(data)

     # ------------------------------------------------------------------
     # Units
     # ------------------------------------------------------------------

     def list_units(self) -> List[UnitResponse]:
          return self._cached(
               UNITS_KEY,
               lambda: [UnitResponse.model_validate(u) for u in self._request("GET", "/api/units")],
          )

     def create_unit(self, unit_number: str, floor: int, status: str = "active",
                     resident_id: Optional[int] = None) -> UnitResponse:
          data = self._request("POST", "/api/units", {
               "unitNumber": unit_number,
               "floor": floor,
               "status": status,
               "residentId": resident_id,
          })
          self.invalidate(UNITS_KEY)
          return UnitResponse.model_validate(data)

     def update_unit(self, unit_id: int, **changes) -> UnitResponse:
          """Partial update; keyword names are snake_case unit fields."""
          body = {to_camel(name): value for name, value in changes.items()}
          data = self._request("PATCH", f"/api/units/{unit_id}", body)
          self.invalidate(UNITS_KEY)
          return UnitResponse.model_validate(data)

     def unit_balance(self, unit_id: int) -> UnitBalanceResponse:
          return self._cached(
               balance_key(unit_id),
               lambda: UnitBalanceResponse.model_validate(self._request("GET", f"/api/units/{unit_id}/balance")),
          )

     # ------------------------------------------------------------------
     # Payments
     # ------------------------------------------------------------------

     def list_payments(self) -> List[PaymentResponse]:
          return self._cached(
               PAYMENTS_KEY,
               lambda: [PaymentResponse.model_validate(p) for p in self._request("GET", "/api/payments")],
          )

     def create_payment(self, unit_id: int, amount: int, period: str, status: str = "pending",
                        description: Optional[str] = None) -> PaymentResponse:
          data = self._request("POST", "/api/payments", {
               "unitId": unit_id,
               "amount": amount,
               "period": period,
               "status": status,
               "description": description,
          })
          self.invalidate(PAYMENTS_KEY, balance_key(unit_id))
          return PaymentResponse.model_validate(data)

     def pay_payment(self, payment_id: int) -> PaymentTransitionResponse:
          result = PaymentTransitionResponse.model_validate(
               self._request("POST", f"/api/payments/{payment_id}/pay")
          )
          self.invalidate(PAYMENTS_KEY, balance_key(result.payment.unit_id))
          return result

     def payment_history(self, payment_id: int) -> PaymentHistoryResponse:
          return PaymentHistoryResponse.model_validate(self._request("GET", f"/api/payments/{payment_id}/history"))

     # ------------------------------------------------------------------
     # Chat
     # ------------------------------------------------------------------

     def list_messages(self, unit_id: int, refresh: bool = False) -> List[MessageResponse]:
          """Messages of a unit; pollers pass refresh=True to bypass the cache."""
          if refresh:
               self.invalidate(messages_key(unit_id))
          return self._cached(
               messages_key(unit_id),
               lambda: [
                    MessageResponse.model_validate(m)
                    for m in self._request("GET", f"/api/chats/{unit_id}/messages")
               ],
          )

     def send_message(self, unit_id: int, message: str, sender_type: Optional[str] = None) -> MessageResponse:
          body = {"unitId": unit_id, "message": message}
          if sender_type is not None:
               body["senderType"] = sender_type
          data = self._request("POST", f"/api/chats/{unit_id}/messages", body)
          self.invalidate(messages_key(unit_id))
          return MessageResponse.model_validate(data)
