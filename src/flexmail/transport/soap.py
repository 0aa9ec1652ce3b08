"""SOAP transport for the Flexmail 3.0.0 API."""

import logging
from xml.parsers.expat import ExpatError

import requests
import xmltodict

from flexmail.exceptions import TransportFaultError

from .base import BaseTransport

logger = logging.getLogger(__name__)

FLEXMAIL_LOCATION = "https://soap.flexmail.eu/3.0.0/flexmail.php"
SOAP_ENVELOPE_NS = "http://schemas.xmlsoap.org/soap/envelope/"


def _local_name(tag: str) -> str:
    """Drop the namespace prefix of an element name."""
    return tag.rsplit(":", 1)[-1]


def simplify(node):
    """
    Reduce a parsed XML node to plain Python values.

    Namespace prefixes and attributes are dropped: an element only carrying
    attributes (``xsi:nil`` or an empty typed element) becomes None and a
    typed element becomes its text.
    """
    if isinstance(node, list):
        return [simplify(item) for item in node]
    if not isinstance(node, dict):
        return node

    children = {key: value for key, value in node.items() if not key.startswith("@")}
    if not children:
        return None
    if set(children) == {"#text"}:
        return children["#text"]
    return {_local_name(key): simplify(value) for key, value in children.items() if key != "#text"}


class SoapTransport(BaseTransport):
    """
    Flexmail SOAP transport.

    Requests are plain SOAP 1.1 envelopes built from the request dict, the
    response object is read back from the body of the answer.
    """

    def __init__(
        self,
        location: str = FLEXMAIL_LOCATION,
        namespace: str | None = None,
        timeout: int = 5,
        verify_ssl: bool = True,
        proxies: dict | None = None,
    ):
        """Configure the SOAP endpoint."""
        self.location = location
        self.namespace = namespace or location
        self.timeout = timeout
        self._verify_ssl = verify_ssl
        self._proxies = proxies

    def build_envelope(self, operation: str, request: dict) -> str:
        """Serialize a request to a SOAP envelope."""
        envelope = {
            "SOAP-ENV:Envelope": {
                "@xmlns:SOAP-ENV": SOAP_ENVELOPE_NS,
                "@xmlns:ns1": self.namespace,
                "SOAP-ENV:Body": {
                    f"ns1:{operation}": {f"{operation}Req": request},
                },
            }
        }
        return xmltodict.unparse(envelope)

    def parse_envelope(self, operation: str, content: bytes | str) -> dict:
        """Extract the response object from a SOAP envelope."""
        try:
            document = simplify(xmltodict.parse(content))
        except ExpatError as err:
            raise TransportFaultError(f"{operation}: unreadable response from Flexmail") from err

        try:
            body = document["Envelope"]["Body"]
        except (KeyError, TypeError) as err:
            raise TransportFaultError(f"{operation}: no SOAP body in response") from err

        if not isinstance(body, dict) or not body:
            raise TransportFaultError(f"{operation}: empty SOAP body in response")

        if "Fault" in body:
            fault = body["Fault"] or {}
            raise TransportFaultError(f"{operation}: SOAP fault {fault.get('faultcode')}: {fault.get('faultstring')}")

        response = next(iter(body.values()))
        # Unwrap <operation>Response/<operation>Resp down to the object holding the error code
        while isinstance(response, dict) and "errorCode" not in response and len(response) == 1:
            response = next(iter(response.values()))

        if not isinstance(response, dict) or "errorCode" not in response:
            raise TransportFaultError(f"{operation}: no error code in response")
        return response

    def call(self, operation: str, request: dict, timeout: int | None = None) -> dict:
        """Post the request envelope and return the response object."""
        headers = {
            "Content-Type": "text/xml; charset=utf-8",
            "SOAPAction": f"{self.namespace}#{operation}",
        }
        try:
            data = self.build_envelope(operation, request).encode("utf-8")
        except (UnicodeError, ValueError) as err:
            raise TransportFaultError(f"{operation}: request cannot be serialized: {err}") from err

        try:
            response = requests.post(
                self.location,
                data=data,
                headers=headers,
                verify=self._verify_ssl,
                timeout=timeout or self.timeout,
                proxies=self._proxies,
            )
        except requests.RequestException as err:
            raise TransportFaultError(f"{operation}: could not reach Flexmail: {err}") from err

        # SOAP faults come back with a 500 status, read them before giving up on the status
        if not response.ok and "Fault" not in response.text:
            logger.debug("Flexmail returned %s to %s: %s", response.status_code, operation, response.text)
            raise TransportFaultError(f"{operation}: Flexmail returned HTTP {response.status_code}")

        return self.parse_envelope(operation, response.content)
