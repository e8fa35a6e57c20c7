"""
Client for the Hetzner Robot webservice.

Documentation: https://robot.your-server.de/doc/webservice/en.html

Every method performs one request and returns the decoded JSON response
(dicts and lists). Failures raise ApiError.
"""

import json
import logging
from typing import Any, Dict, Iterable, Optional, Union
from urllib.parse import urlencode

from .config import RobotConfig
from .errors import ApiError, NOT_REACHABLE, RESPONSE_DECODE_ERROR
from .transport import HTTPTransport, RawResult, Request, Transport, build_form_data


logger = logging.getLogger(__name__)

VERSION = "2018.06"
USER_AGENT = f"HetznerRobotClient/{VERSION}"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def decode_result(result: RawResult) -> Any:
    """
    Decode and validate a raw webservice result.

    Args:
        result: Raw transport result

    Returns:
        Parsed JSON value, an empty dict for an empty body

    Raises:
        ApiError: NOT_REACHABLE when no response was obtained,
            RESPONSE_DECODE_ERROR for malformed JSON or a null document,
            the remote code and message for status 400-503 with an error
            object, otherwise the bare status code
    """
    if not result.reachable:
        raise ApiError("not reachable", NOT_REACHABLE)

    if result.body == "":
        response = {}
    else:
        try:
            response = json.loads(result.body, parse_constant=_reject_constant)
        except ValueError:
            response = None

    if response is None:
        raise ApiError("response can not be decoded", RESPONSE_DECODE_ERROR)

    if 400 <= result.status_code <= 503:
        error = response.get("error") if isinstance(response, dict) else None
        if (
            isinstance(error, dict)
            and error.get("message") is not None
            and error.get("code") is not None
        ):
            raise ApiError(error["message"], error["code"])
        raise ApiError(None, result.status_code)

    return response


class RobotClient:
    """
    Robot webservice client.

    The HTTP side is delegated to a Transport (HTTPTransport by default), so
    any object with execute(request) -> RawResult can stand in for it.
    """

    def __init__(self, config: RobotConfig, transport: Optional[Transport] = None):
        """
        Initialize the client.

        Args:
            config: Account and connection settings
            transport: Optional transport, built from config when omitted
        """
        self.config = config
        self.base_url = config.base_url.rstrip('/')
        self.transport = transport if transport is not None else HTTPTransport(
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
            verbose=config.verbose,
        )

        self.http_headers: Dict[str, str] = {
            'Accept': 'application/json',
            'User-Agent': USER_AGENT,
        }
        self.http_headers.update(config.headers)

        logger.debug(f"Robot client initialized: {self.base_url}")

    def set_http_header(self, name: str, value: str) -> None:
        """Set a header sent with every following request."""
        self.http_headers[name] = value

    def close(self) -> None:
        """Release the transport."""
        self.transport.close()

    def __enter__(self) -> "RobotClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # Request helpers

    def _url(self, *segments: Any, query: Optional[Dict[str, Any]] = None) -> str:
        url = "/".join([self.base_url] + [str(s) for s in segments])
        if query:
            url += "?" + urlencode(build_form_data(query))
        return url

    def _execute(self, method: str, url: str, data: Optional[Dict[str, Any]] = None) -> Any:
        request = Request(
            method=method,
            url=url,
            headers=dict(self.http_headers),
            body=data,
            auth=(self.config.username, self.config.password),
        )
        result = self.transport.execute(request)
        try:
            return decode_result(result)
        except ApiError as e:
            logger.debug(f"{method} {url} failed: {e}")
            raise

    def _get(self, url: str) -> Any:
        return self._execute("GET", url)

    def _post(self, url: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return self._execute("POST", url, data)

    def _put(self, url: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return self._execute("PUT", url, data)

    def _delete(self, url: str) -> Any:
        return self._execute("DELETE", url)

    # Failover

    def failover_get(self, ip: Optional[str] = None, query: Optional[Dict[str, Any]] = None) -> Any:
        """
        Get one failover IP, or all of them when no IP is given.

        Args:
            ip: Failover IP address
            query: Additional query string parameters

        Returns:
            Failover object, or list of failover objects
        """
        if ip:
            return self._get(self._url("failover", ip, query=query))
        return self._get(self._url("failover", query=query))

    def failover_get_by_server_ip(self, server_ip: str) -> Any:
        """Get the failover IPs of a server."""
        return self.failover_get(None, {'server_ip': server_ip})

    def failover_route(self, failover_ip: str, active_server_ip: str) -> Any:
        """
        Route a failover IP to another server.

        Args:
            failover_ip: Failover IP address
            active_server_ip: Main IP of the new target server
        """
        return self._post(self._url("failover", failover_ip), {
            'active_server_ip': active_server_ip,
        })

    def failover_delete(self, failover_ip: str) -> Any:
        """Delete the routing of a failover IP."""
        return self._delete(self._url("failover", failover_ip))

    # Reset

    def reset_get(self, ip: Optional[str] = None) -> Any:
        """Get reset options of a server, or of all servers."""
        if ip:
            return self._get(self._url("reset", ip))
        return self._get(self._url("reset"))

    def reset_execute(self, ip: str, type: str) -> Any:
        """
        Reset a server.

        Args:
            ip: Server main IP
            type: Reset type, e.g. "sw", "hw" or "man"
        """
        return self._post(self._url("reset", ip), {'type': type})

    # Boot configuration

    def boot_get(self, ip: str) -> Any:
        """Get the boot configuration overview of a server."""
        return self._get(self._url("boot", ip))

    def rescue_get(self, ip: str) -> Any:
        return self._get(self._url("boot", ip, "rescue"))

    def rescue_activate(self, ip: str, os: str, arch: Union[int, str],
                        authorized_keys: Iterable[str] = ()) -> Any:
        """
        Activate the rescue system for the next boot.

        Args:
            ip: Server main IP
            os: Rescue operating system, e.g. "linux"
            arch: Architecture, 32 or 64
            authorized_keys: SSH key fingerprints to install

        Returns:
            Rescue object, including the generated root password
        """
        return self._post(self._url("boot", ip, "rescue"), {
            'os': os,
            'arch': arch,
            'authorized_key': list(authorized_keys),
        })

    def rescue_deactivate(self, ip: str) -> Any:
        return self._delete(self._url("boot", ip, "rescue"))

    def rescue_get_last(self, ip: str) -> Any:
        """Get the data of the last rescue activation."""
        return self._get(self._url("boot", ip, "rescue", "last"))

    def linux_get(self, ip: str) -> Any:
        return self._get(self._url("boot", ip, "linux"))

    def linux_activate(self, ip: str, dist: str, arch: Union[int, str], lang: str,
                       authorized_keys: Iterable[str] = ()) -> Any:
        """
        Activate a Linux installation for the next boot.

        Args:
            ip: Server main IP
            dist: Distribution name
            arch: Architecture, 32 or 64
            lang: Language of the installation
            authorized_keys: SSH key fingerprints to install
        """
        return self._post(self._url("boot", ip, "linux"), {
            'dist': dist,
            'arch': arch,
            'lang': lang,
            'authorized_key': list(authorized_keys),
        })

    def linux_deactivate(self, ip: str) -> Any:
        return self._delete(self._url("boot", ip, "linux"))

    def linux_get_last(self, ip: str) -> Any:
        """Get the data of the last Linux installation activation."""
        return self._get(self._url("boot", ip, "linux", "last"))

    def vnc_get(self, ip: str) -> Any:
        return self._get(self._url("boot", ip, "vnc"))

    def vnc_activate(self, ip: str, dist: str, arch: Union[int, str], lang: str) -> Any:
        """Activate a VNC installation for the next boot."""
        return self._post(self._url("boot", ip, "vnc"), {
            'dist': dist,
            'arch': arch,
            'lang': lang,
        })

    def vnc_deactivate(self, ip: str) -> Any:
        return self._delete(self._url("boot", ip, "vnc"))

    def windows_get(self, ip: str) -> Any:
        return self._get(self._url("boot", ip, "windows"))

    def windows_activate(self, ip: str, lang: str) -> Any:
        """Activate a Windows installation for the next boot."""
        return self._post(self._url("boot", ip, "windows"), {'lang': lang})

    def windows_deactivate(self, ip: str) -> Any:
        return self._delete(self._url("boot", ip, "windows"))

    def cpanel_get(self, ip: str) -> Any:
        return self._get(self._url("boot", ip, "cpanel"))

    def cpanel_activate(self, ip: str, dist: str, arch: Union[int, str], lang: str,
                        hostname: str) -> Any:
        """
        Activate a cPanel installation for the next boot.

        Args:
            ip: Server main IP
            dist: Distribution name
            arch: Architecture, 32 or 64
            lang: Language of the installation
            hostname: Hostname of the new installation
        """
        return self._post(self._url("boot", ip, "cpanel"), {
            'dist': dist,
            'arch': arch,
            'lang': lang,
            'hostname': hostname,
        })

    def cpanel_deactivate(self, ip: str) -> Any:
        return self._delete(self._url("boot", ip, "cpanel"))

    def plesk_get(self, ip: str) -> Any:
        return self._get(self._url("boot", ip, "plesk"))

    def plesk_activate(self, ip: str, dist: str, arch: Union[int, str], lang: str,
                       hostname: str) -> Any:
        """Activate a Plesk installation for the next boot."""
        return self._post(self._url("boot", ip, "plesk"), {
            'dist': dist,
            'arch': arch,
            'lang': lang,
            'hostname': hostname,
        })

    def plesk_deactivate(self, ip: str) -> Any:
        return self._delete(self._url("boot", ip, "plesk"))

    # Wake on LAN

    def wol_get(self, ip: str) -> Any:
        return self._get(self._url("wol", ip))

    def wol_send(self, ip: str) -> Any:
        """Send a Wake on LAN packet to a server."""
        return self._post(self._url("wol", ip), {'server_ip': ip})

    # Reverse DNS

    def rdns_get(self, ip: str) -> Any:
        return self._get(self._url("rdns", ip))

    def rdns_create(self, ip: str, ptr: str) -> Any:
        """Create a reverse DNS entry."""
        return self._put(self._url("rdns", ip), {'ptr': ptr})

    def rdns_update(self, ip: str, ptr: str) -> Any:
        """Update a reverse DNS entry."""
        return self._post(self._url("rdns", ip), {'ptr': ptr})

    def rdns_delete(self, ip: str) -> Any:
        return self._delete(self._url("rdns", ip))

    # Servers

    def server_get_all(self) -> Any:
        """Get all servers of the account."""
        return self._get(self._url("server"))

    def server_get(self, ip: str) -> Any:
        return self._get(self._url("server", ip))

    def server_name_update(self, ip: str, name: str) -> Any:
        """Rename a server."""
        return self._post(self._url("server", ip), {'server_name': name})

    def server_cancellation_get(self, ip: str) -> Any:
        """Get cancellation data of a server."""
        return self._get(self._url("server", ip, "cancellation"))

    def server_cancel(self, ip: str, cancellation_date: str,
                      cancellation_reason: Optional[str] = None) -> Any:
        """
        Cancel a server.

        Args:
            ip: Server main IP
            cancellation_date: Date (YYYY-MM-DD) or "now"
            cancellation_reason: Optional cancellation reason
        """
        data = {'cancellation_date': cancellation_date}
        if cancellation_reason:
            data['cancellation_reason'] = cancellation_reason

        return self._post(self._url("server", ip, "cancellation"), data)

    def server_cancellation_delete(self, ip: str) -> Any:
        """Revoke a server cancellation."""
        return self._delete(self._url("server", ip, "cancellation"))

    # Single IPs

    def ip_get_all(self) -> Any:
        return self._get(self._url("ip"))

    def ip_get_by_server_ip(self, server_ip: str) -> Any:
        """Get all single IPs of a server."""
        return self._get(self._url("ip", query={'server_ip': server_ip}))

    def ip_get(self, ip: str) -> Any:
        return self._get(self._url("ip", ip))

    def ip_enable_traffic_warnings(self, ip: str) -> Any:
        return self._post(self._url("ip", ip), {'traffic_warnings': 'true'})

    def ip_disable_traffic_warnings(self, ip: str) -> Any:
        return self._post(self._url("ip", ip), {'traffic_warnings': 'false'})

    def ip_set_traffic_warning_limits(self, ip: str, hourly: int, daily: int, monthly: int) -> Any:
        """
        Set the traffic warning limits of a single IP.

        Args:
            ip: IP address
            hourly: Hourly limit in MB
            daily: Daily limit in MB
            monthly: Monthly limit in GB
        """
        return self._post(self._url("ip", ip), {
            'traffic_hourly': hourly,
            'traffic_daily': daily,
            'traffic_monthly': monthly,
        })

    # Subnets

    def subnet_get_all(self) -> Any:
        return self._get(self._url("subnet"))

    def subnet_get_by_server_ip(self, server_ip: str) -> Any:
        """Get all subnets of a server."""
        return self._get(self._url("subnet", query={'server_ip': server_ip}))

    def subnet_get(self, ip: str) -> Any:
        return self._get(self._url("subnet", ip))

    def subnet_enable_traffic_warnings(self, ip: str) -> Any:
        return self._post(self._url("subnet", ip), {'traffic_warnings': 'true'})

    def subnet_disable_traffic_warnings(self, ip: str) -> Any:
        return self._post(self._url("subnet", ip), {'traffic_warnings': 'false'})

    def subnet_set_traffic_warning_limits(self, ip: str, hourly: int, daily: int,
                                          monthly: int) -> Any:
        """Set the traffic warning limits of a subnet (MB, MB, GB)."""
        return self._post(self._url("subnet", ip), {
            'traffic_hourly': hourly,
            'traffic_daily': daily,
            'traffic_monthly': monthly,
        })

    # Traffic

    def traffic_get(self, options: Dict[str, Any]) -> Any:
        """
        Query traffic for single IPs and subnets.

        Args:
            options: Query fields
                'ip'     - IP address or list of IP addresses
                'subnet' - net IP address or list of them
                'type'   - report type: "day", "month" or "year"
                'from'   - start date
                'to'     - end date

                Date format:
                    YYYY-MM for type year
                    YYYY-MM-DD for type month
                    YYYY-MM-DDTHH for type day

        Returns:
            Traffic object
        """
        return self._post(self._url("traffic"), options)

    def traffic_get_for_ip(self, ip: Union[str, Iterable[str]], type: str,
                           from_: str, to: str) -> Any:
        """Query traffic for one or more single IPs."""
        return self.traffic_get({
            'ip': ip if isinstance(ip, str) else list(ip),
            'type': type,
            'from': from_,
            'to': to,
        })

    def traffic_get_for_subnet(self, subnet: Union[str, Iterable[str]], type: str,
                               from_: str, to: str) -> Any:
        """Query traffic for one or more subnets."""
        return self.traffic_get({
            'subnet': subnet if isinstance(subnet, str) else list(subnet),
            'type': type,
            'from': from_,
            'to': to,
        })

    # MAC addresses

    def separate_mac_get(self, ip: str) -> Any:
        """Get the separate MAC of a single IP."""
        return self._get(self._url("ip", ip, "mac"))

    def separate_mac_create(self, ip: str) -> Any:
        return self._put(self._url("ip", ip, "mac"))

    def separate_mac_delete(self, ip: str) -> Any:
        return self._delete(self._url("ip", ip, "mac"))

    def subnet_mac_get(self, ip: str) -> Any:
        """Get the MAC address an IPv6 subnet is routed to."""
        return self._get(self._url("subnet", ip, "mac"))

    def subnet_mac_set(self, ip: str, mac: str) -> Any:
        return self._put(self._url("subnet", ip, "mac"), {'mac': mac})

    def subnet_mac_reset(self, ip: str) -> Any:
        """Reset the MAC of an IPv6 subnet to the server's own MAC."""
        return self._delete(self._url("subnet", ip, "mac"))

    # SSH keys

    def key_get_all(self) -> Any:
        return self._get(self._url("key"))

    def key_get(self, fingerprint: str) -> Any:
        return self._get(self._url("key", fingerprint))

    def key_create(self, name: str, data: str) -> Any:
        """
        Store a new SSH public key.

        Args:
            name: Key name
            data: Key in OpenSSH or SSH2 (RFC 4716) format
        """
        return self._post(self._url("key"), {
            'name': name,
            'data': data,
        })

    def key_update(self, fingerprint: str, name: str) -> Any:
        """Rename an SSH key."""
        return self._post(self._url("key", fingerprint), {'name': name})

    def key_delete(self, fingerprint: str) -> Any:
        return self._delete(self._url("key", fingerprint))

    # Ordering

    def order_server_product_get_all(self) -> Any:
        """Get all currently offered standard server products."""
        return self._get(self._url("order", "server", "product"))

    def order_server_product_get(self, product_id: str) -> Any:
        return self._get(self._url("order", "server", "product", product_id))

    def order_server_transaction_get_all(self) -> Any:
        """Get all standard server orders of the last 30 days."""
        return self._get(self._url("order", "server", "transaction"))

    def order_server_transaction_get(self, transaction_id: str) -> Any:
        return self._get(self._url("order", "server", "transaction", transaction_id))

    def order_server(
        self,
        product_id: str,
        location: Optional[str],
        authorized_keys: Iterable[str] = (),
        password: Optional[str] = None,
        dist: Optional[str] = None,
        arch: Optional[Union[int, str]] = None,
        lang: Optional[str] = None,
        test: bool = False,
    ) -> Any:
        """
        Order a standard server.

        Args:
            product_id: Product id
            location: Desired location
            authorized_keys: SSH key fingerprints
            password: Root password, only sent when no keys are given
            dist: Distribution name (default: rescue system)
            arch: Architecture (default: 64)
            lang: Language of the distribution (default: en)
            test: Only validate the order

        Returns:
            Transaction object
        """
        data: Dict[str, Any] = {
            'product_id': product_id,
            'location': location,
        }
        authorized_keys = list(authorized_keys)
        if authorized_keys:
            data['authorized_key'] = authorized_keys
        elif password is not None:
            data['password'] = password
        if dist is not None:
            data['dist'] = dist
        if arch is not None:
            data['arch'] = arch
        if lang is not None:
            data['lang'] = lang
        if test:
            data['test'] = 'true'

        return self._post(self._url("order", "server", "transaction"), data)

    def order_server_market_product_get_all(self) -> Any:
        """Get all currently offered server market products."""
        return self._get(self._url("order", "server_market", "product"))

    def order_server_market_product_get(self, product_id: Union[int, str]) -> Any:
        return self._get(self._url("order", "server_market", "product", product_id))

    def order_server_market_transaction_get_all(self) -> Any:
        """Get all server market orders of the last 30 days."""
        return self._get(self._url("order", "server_market", "transaction"))

    def order_server_market_transaction_get(self, transaction_id: str) -> Any:
        return self._get(self._url("order", "server_market", "transaction", transaction_id))

    def order_market_server(
        self,
        product_id: Union[int, str],
        authorized_keys: Iterable[str] = (),
        password: Optional[str] = None,
        test: bool = False,
    ) -> Any:
        """
        Order a server from the server market.

        Args:
            product_id: Product id
            authorized_keys: SSH key fingerprints
            password: Root password, only sent when no keys are given
            test: Only validate the order
        """
        data: Dict[str, Any] = {'product_id': product_id}
        authorized_keys = list(authorized_keys)
        if authorized_keys:
            data['authorized_key'] = authorized_keys
        elif password is not None:
            data['password'] = password
        if test:
            data['test'] = 'true'

        return self._post(self._url("order", "server_market", "transaction"), data)

    # Server snapshots

    def snapshot_get(self, ip: str) -> Any:
        """Get all snapshots of a server."""
        return self._get(self._url("snapshot", ip))

    def snapshot_create(self, ip: str) -> Any:
        return self._post(self._url("snapshot", ip))

    def snapshot_delete(self, ip: str, id: Union[int, str]) -> Any:
        return self._delete(self._url("snapshot", ip, id))

    def snapshot_revert(self, ip: str, id: Union[int, str]) -> Any:
        """Revert a server to one of its snapshots."""
        return self._post(self._url("snapshot", ip, id), {'revert': True})

    def snapshot_name_update(self, ip: str, id: Union[int, str], name: str) -> Any:
        return self._post(self._url("snapshot", ip, id), {'name': name})

    # Storage Boxes

    def storagebox_get_all(self) -> Any:
        return self._get(self._url("storagebox"))

    def storagebox_get(self, id: Union[int, str]) -> Any:
        return self._get(self._url("storagebox", id))

    def storagebox_name_update(self, id: Union[int, str], name: str) -> Any:
        """Rename a Storage Box."""
        return self._post(self._url("storagebox", id), {'storagebox_name': name})

    def storagebox_directory_listing(self, id: Union[int, str]) -> Any:
        """Get the directory listing of a Storage Box."""
        return self._get(self._url("storagebox", id, "dir"))

    def storagebox_snapshot_get(self, id: Union[int, str]) -> Any:
        """Get all snapshots of a Storage Box."""
        return self._get(self._url("storagebox", id, "snapshot"))

    def storagebox_snapshot_create(self, id: Union[int, str]) -> Any:
        return self._post(self._url("storagebox", id, "snapshot"))

    def storagebox_snapshot_delete(self, id: Union[int, str], name: str) -> Any:
        return self._delete(self._url("storagebox", id, "snapshot", name))

    def storagebox_snapshot_revert(self, id: Union[int, str], name: str) -> Any:
        return self._post(self._url("storagebox", id, "snapshot", name), {'revert': 'true'})

    def storagebox_snapshot_set_comment(self, id: Union[int, str], name: str, comment: str) -> Any:
        """Set the comment of a Storage Box snapshot."""
        return self._post(self._url("storagebox", id, "snapshot", name, "comment"), {
            'comment': comment,
        })

    def storagebox_snapshot_plan_get(self, id: Union[int, str]) -> Any:
        return self._get(self._url("storagebox", id, "snapshotplan"))

    def storagebox_snapshot_plan_edit(self, id: Union[int, str], data: Dict[str, Any]) -> Any:
        """
        Create or change the snapshot plan of a Storage Box.

        Args:
            id: Storage Box id
            data: Plan fields (status, minute, hour, day_of_week, ...)
        """
        return self._post(self._url("storagebox", id, "snapshotplan"), data)

    def storagebox_subaccount_get(self, id: Union[int, str]) -> Any:
        """Get all sub accounts of a Storage Box."""
        return self._get(self._url("storagebox", id, "subaccount"))

    def storagebox_subaccount_create(self, id: Union[int, str], data: Dict[str, Any]) -> Any:
        return self._post(self._url("storagebox", id, "subaccount"), data)

    def storagebox_subaccount_update(self, id: Union[int, str], username: str,
                                     data: Dict[str, Any]) -> Any:
        return self._put(self._url("storagebox", id, "subaccount", username), data)

    def storagebox_subaccount_reset_password(self, id: Union[int, str], username: str) -> Any:
        """Reset the password of a sub account, the new one is in the response."""
        return self._post(self._url("storagebox", id, "subaccount", username, "password"))

    def storagebox_subaccount_delete(self, id: Union[int, str], username: str) -> Any:
        return self._delete(self._url("storagebox", id, "subaccount", username))

    # Firewall

    def firewall_get(self, ip: str, port: str = 'main') -> Any:
        """
        Get the firewall of a server.

        Args:
            ip: Server main IP
            port: Switch port, only needed for servers with several ports
        """
        return self._get(self._url("firewall", ip, port))

    def firewall_create_or_update(
        self,
        ip: str,
        status: str,
        whitelist_hos: Union[bool, str],
        rules: Dict[str, Any],
        port: str = 'main',
    ) -> Any:
        """
        Create a firewall or replace the existing one.

        Args:
            ip: Server main IP
            status: "active" or "disabled"
            whitelist_hos: Allow Hetzner services (DHCP, DNS, backup...)
            rules: Rules keyed by direction, e.g.
                {'input': [{'name': 'ssh', 'ip_version': 'ipv4',
                            'dst_port': '22', 'action': 'accept'}]}
                Rule fields: name, ip_version, dst_ip, src_ip, dst_port,
                src_port, protocol, tcp_flags, action
            port: Switch port
        """
        return self._post(self._url("firewall", ip, port), {
            'status': status,
            'whitelist_hos': whitelist_hos,
            'rules': rules,
        })

    def firewall_create_or_update_from_template(self, ip: str, template_id: Union[int, str],
                                                port: str = 'main') -> Any:
        """Create or replace a firewall from a template."""
        return self._post(self._url("firewall", ip, port), {'template_id': template_id})

    def firewall_delete(self, ip: str, port: str = 'main') -> Any:
        return self._delete(self._url("firewall", ip, port))

    def firewall_template_get_all(self) -> Any:
        return self._get(self._url("firewall", "template"))

    def firewall_template_create(self, name: str, whitelist_hos: Union[bool, str],
                                 is_default: Union[bool, str], rules: Dict[str, Any]) -> Any:
        """
        Create a firewall template.

        Args:
            name: Template name
            whitelist_hos: Allow Hetzner services
            is_default: Use the template as default for new servers
            rules: Rules, same layout as for firewall_create_or_update
        """
        return self._post(self._url("firewall", "template"), {
            'name': name,
            'whitelist_hos': whitelist_hos,
            'is_default': is_default,
            'rules': rules,
        })

    def firewall_template_get(self, template_id: Union[int, str]) -> Any:
        return self._get(self._url("firewall", "template", template_id))

    def firewall_template_update(self, template_id: Union[int, str], name: str,
                                 whitelist_hos: Union[bool, str], is_default: Union[bool, str],
                                 rules: Dict[str, Any]) -> Any:
        """Replace a firewall template."""
        return self._post(self._url("firewall", "template", template_id), {
            'name': name,
            'whitelist_hos': whitelist_hos,
            'is_default': is_default,
            'rules': rules,
        })

    def firewall_template_update_name(self, template_id: Union[int, str], name: str) -> Any:
        return self._post(self._url("firewall", "template", template_id), {'name': name})

    def firewall_template_delete(self, template_id: Union[int, str]) -> Any:
        return self._delete(self._url("firewall", "template", template_id))
