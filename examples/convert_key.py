from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from rsa_keyconv import KeyConversionError, convert_private_key

# Build a PKCS#1 key in memory
key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
pkcs1_pem = key.private_bytes(
    serialization.Encoding.PEM,
    serialization.PrivateFormat.TraditionalOpenSSL,
    serialization.NoEncryption(),
).decode()

result = convert_private_key("PKCS#1", pkcs1_pem, "PKCS#8")
print(result.output_pem.splitlines()[0])
print(f"id: {result.id}")

# Converting back gives the original bytes
back = convert_private_key("PKCS#8", result.output_pem, "PKCS#1")
print("round trip identical:", back.output_pem == pkcs1_pem)

try:
    convert_private_key("PKCS#7", pkcs1_pem, "PKCS#8")
except KeyConversionError as e:
    print(e)
