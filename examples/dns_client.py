import logging
import os

from restchain import Client


class DNSClient(Client):
    class Meta:
        headers = {'Accept': 'application/json', 'Content-Type': 'application/json'}

    def basic_headers(self):
        headers = super(DNSClient, self).basic_headers()
        headers['X-Api-Key'] = os.environ.get('DNS_API_KEY', '')
        return headers


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)

    client = DNSClient.from_url('https://api.example.com/V2.0', timeout=10)
    client.attach_logger(logging.getLogger('dns'))

    domains = client.dns.managed()
    print(domains.status_code, domains.reason)

    for domain in domains.json().get('data', []):
        records = client.dns.managed[domain['id']].records({'type': 'A'})
        print(domain['name'], records.json())
