from fastapi.testclient import TestClient
from civic_connect.main import app

client = TestClient(app)

print('ROOT:')
print(client.get('/').json())

print('\nHEALTH:')
print(client.get('/health').json())

print('\nAI HEALTH:')
print(client.get('/health/ai').json())

print('\nCHAT:')
for message in ['hello there', 'take me to the report page', 'any insight on water issues?', '']:
    resp = client.post('/chat', json={'message': message})
    print(resp.status_code, resp.json())

print('\nAI CLASSIFY:')
try:
    resp = client.post('/ai/classify', json={'description': 'Deep pothole near Andheri station'})
    print(resp.status_code)
    try:
        print(resp.json())
    except Exception:
        print(resp.text)
except Exception as e:
    print('AI call raised exception:', e)
