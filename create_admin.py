#!/usr/bin/env python3
"""
Script to generate the admin credential for Nova Eco-Packaging.
Paste the printed lines into your .env file (or the server environment).
The password itself is never stored.
"""

import getpass
import sys
from flask_bcrypt import generate_password_hash


def build_env_lines(email, password):
    """
    Build the ADMIN_EMAIL / ADMIN_PASSWORD_HASH lines.
    
    Args:
        email: Admin email address
        password: Admin password (will be hashed)
    """
    password_hash = generate_password_hash(password).decode('utf-8')
    return [
        f'ADMIN_EMAIL={email.strip().lower()}',
        f"ADMIN_PASSWORD_HASH='{password_hash}'",
    ]


def main():
    print("=" * 50)
    print("Nova Eco-Packaging - Admin Credential")
    print("=" * 50)
    
    email = input("Admin email: ").strip()
    if not email or '@' not in email:
        print("❌ Please enter a valid email address.")
        sys.exit(1)
    
    password = getpass.getpass("Admin password: ")
    confirm = getpass.getpass("Confirm password: ")
    if not password:
        print("❌ Password cannot be empty.")
        sys.exit(1)
    if password != confirm:
        print("❌ Passwords do not match.")
        sys.exit(1)
    
    print("\n✅ Add these lines to your .env file:\n")
    for line in build_env_lines(email, password):
        print(line)


if __name__ == '__main__':
    main()
