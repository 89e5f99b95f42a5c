"""Swiss QR-bill backend of the freelancer back-office."""
