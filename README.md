# sockdemo

A handful of small command-line socket programs, each one a short, readable
example of a common networking task: resolving addresses, serving the time
over HTTP, sending and receiving UDP datagrams, an interactive TCP client,
servers that echo back what they receive in upper case, and a listing of the
machine's network interface addresses.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `sockdemo-resolve [HOST [PORT]]` | Prints `Ready to use socket API.`; given a host (and optionally a port), resolves it as IPv4 TCP and prints the numeric address and the service. |
| `sockdemo-time` | Prints the current local time. |
| `sockdemo-time-server [--host H] [--port P]` | Listens on IPv4 (port 8080 by default), answers one HTTP request with the local time, then exits. |
| `sockdemo-udp-recv [--host H] [--port P]` | Binds an IPv4 UDP socket (port 8080 by default), prints one datagram and the numeric address and port of its sender. |
| `sockdemo-udp-send [--host H] [--port P] [--message TEXT]` | Sends one UDP datagram, by default `Hello World!` to 127.0.0.1 port 8080. |
| `sockdemo-tcp-client HOSTNAME PORT` | Connects to a TCP server; lines typed on standard input are sent, and whatever arrives is printed. Ends when the server closes the connection or standard input ends. |
| `sockdemo-toupper [--udp] [--host H] [--port P]` | Runs a server on port 8080 (TCP, or UDP with `--udp`) that sends back everything it receives with ASCII letters in upper case. Runs until interrupted with Ctrl-C. |
| `sockdemo-interfaces` | Lists each interface's IPv4 and IPv6 addresses, one tab-separated line per address. |

Errors from address lookup, binding or connecting are reported on standard
error and the command exits with status 1.

### Trying the time server

In one terminal:

```
sockdemo-time-server
```

Then open `http://127.0.0.1:8080/` in a browser, or connect with the client:

```
sockdemo-tcp-client 127.0.0.1 8080
```

and type a request such as `GET / HTTP/1.1` followed by an empty line.

### Trying UDP

Start the receiver first, then send to it from a second terminal:

```
sockdemo-udp-recv
sockdemo-udp-send
```

### Trying the upper-case server

```
sockdemo-toupper
sockdemo-tcp-client 127.0.0.1 8080
```

Every line typed into the client comes back in capitals. The TCP server
handles many clients at once.

## Using it from Python

The building blocks are importable:

- `sockdemo.addresses.resolve(host, port, family, socktype, passive)` returns
  address records (raising `socket.gaierror` on failure), and
  `sockdemo.addresses.numeric_name(sockaddr, numeric_service)` returns the
  numeric host and the service of a socket address.
- `sockdemo.timeinfo.local_time_string(timestamp)` formats a time in `ctime`
  form, ending with a newline.
- `sockdemo.time_server.build_response(timestamp)` builds the HTTP reply as
  bytes; `open_listener(host, port)` and `serve_once(listener, out)` run the
  server, `serve_once` returning the request it received.
- `sockdemo.udp_tools.open_listener(host, port)`, `receive_one(sock, out)`
  and `send_message(host, port, message, out)` cover the UDP pair.
- `sockdemo.tcp_client.run_client(host, port, stdin, out)` runs the
  interactive client against any text streams and returns the bytes received.
- `sockdemo.toupper_server.to_upper(data)` does the conversion;
  `open_tcp_listener`, `open_udp_listener`, `serve_tcp` and `serve_udp` run
  the servers, which stop once their socket is closed.
- `sockdemo.interfaces.list_addresses()` returns `InterfaceAddress` entries
  (`name`, `family`, `address`), and `format_address(entry)` renders one as a
  line of the listing.

Functions that take `out` write their progress messages to that stream, or
to standard output when it is not given.

## What it does not do

The servers bind IPv4 addresses only, and the time server answers a single
client before exiting. There is no TLS and no HTTP parsing: the time server
replies the same way whatever the request says.