import pytest

STATUS_PAGE = """<!DOCTYPE html>
<html lang="en">
<head><title>Purple I2P Webconsole</title></head>
<body>
<div class="content">

<b>Uptime:</b> 1 day, 1 hours, 1 minutes, 1 seconds<br>
<b>Network status:</b> OK<br>
<b>Network status v6:</b> OK<br>
<b>Tunnel creation success rate:</b> 4%<br>
<b>Received:</b> 100.1 GiB (3301.31 KiB/s)<br>
<b>Sent:</b> 100.2 GiB (3300.43 KiB/s)<br>
<b>Transit:</b> 98 GiB (3000.55 KiB/s)<br>
<b>Data path:</b> /home/i2pd/data<br>
<b>Router Ident:</b>redacted<br>
<b>Router Caps:</b> PR<br>
<b>Version:</b>2.59.0<br>
<b>Routers:</b> 10100&nbsp;&nbsp;&nbsp;<b>Floodfills:</b> 3612&nbsp;&nbsp;&nbsp;<b>LeaseSets:</b> 0<br>
<b>Client Tunnels:</b> 10&nbsp;&nbsp;&nbsp;<b>Transit Tunnels:</b> 1234<br>

<table class="services">
<caption>Services</caption>
<tbody>
<tr><td>HTTP Proxy</td><td class='enabled'>Enabled</td></tr>
<tr><td>SOCKS Proxy</td><td class='enabled'>Enabled</td></tr>
<tr><td>BOB</td><td class='disabled'>Disabled</td></tr>
<tr><td>SAM</td><td class='enabled'>Enabled</td></tr>
<tr><td>I2CP</td><td class='disabled'>Disabled</td></tr>
<tr><td>I2PControl</td><td class='disabled'>Disabled</td></tr>
</tbody>
</table>

</div>
</body>
</html>"""


@pytest.fixture
def status_page() -> str:
    return STATUS_PAGE
