"""SQL statements used by the repositories; parameters are written ``$1``, ``$2``, ..."""

# User
CREATE_USER = "INSERT INTO users (name, email, password, role_id, role_name, updated_at) VALUES ($1, $2, $3, $4, $5, $6) RETURNING id, name, email, role_id, role_name, created_at, updated_at"
# updates a user without touching the stored hash
UPDATE_USER = "UPDATE users SET name = $2, email = $3, role_id = $4, role_name = $5, updated_at = $6 WHERE id = $1 AND is_deleted = false RETURNING id, name, email, role_id, role_name, created_at, updated_at"
DELETE_USER = "UPDATE users SET is_deleted = true WHERE id = $1"
GET_USER = "SELECT id, name, email, role_id, role_name, created_at, updated_at FROM users WHERE id = $1"
GET_ALL_USERS = "SELECT id, name, email, role_id, role_name, created_at, updated_at FROM users WHERE is_deleted = false ORDER BY id LIMIT $1 OFFSET $2"

# Role
CREATE_ROLE = "INSERT INTO roles (role_name, updated_at) VALUES ($1, $2) RETURNING id, role_name, created_at, updated_at"
UPDATE_ROLE = "UPDATE roles SET role_name = $2, updated_at = $3 WHERE id = $1 AND is_deleted = false RETURNING id, role_name, created_at, updated_at"
DELETE_ROLE = "UPDATE roles SET is_deleted = true WHERE id = $1"
GET_ROLE = "SELECT id, role_name, created_at, updated_at FROM roles WHERE id = $1"
GET_ALL_ROLES = "SELECT id, role_name, created_at, updated_at FROM roles WHERE is_deleted = false ORDER BY id LIMIT $1 OFFSET $2"

# Customer
CREATE_CUSTOMER = "INSERT INTO customers (name, email, address, phone_number, updated_at) VALUES ($1, $2, $3, $4, $5) RETURNING id, name, email, address, phone_number, created_at, updated_at"
UPDATE_CUSTOMER = "UPDATE customers SET name = $2, email = $3, address = $4, phone_number = $5, updated_at = $6 WHERE id = $1 AND is_deleted = false RETURNING id, name, email, address, phone_number, created_at, updated_at"
DELETE_CUSTOMER = "UPDATE customers SET is_deleted = true WHERE id = $1"
GET_CUSTOMER = "SELECT id, name, email, address, phone_number, created_at, updated_at FROM customers WHERE id = $1 AND is_deleted = false"
GET_ALL_CUSTOMERS = "SELECT id, name, email, address, phone_number, created_at, updated_at FROM customers WHERE is_deleted = false ORDER BY id LIMIT $1 OFFSET $2"

# Room
CREATE_ROOM = "INSERT INTO rooms (id, room_number, room_type, capacity, facility, price, status, updated_at) VALUES ($1, $2, $3, $4, $5, $6, $7, $8) RETURNING id, room_number, room_type, capacity, facility, price, status, created_at, updated_at"
UPDATE_ROOM = "UPDATE rooms SET room_number = $2, room_type = $3, capacity = $4, facility = $5, price = $6, status = $7, updated_at = $8 WHERE id = $1 AND is_deleted = false RETURNING id, room_number, room_type, capacity, facility, price, status, created_at, updated_at"
DELETE_ROOM = "UPDATE rooms SET is_deleted = true WHERE id = $1"
GET_ROOM = "SELECT id, room_number, room_type, capacity, facility, price, status, created_at, updated_at FROM rooms WHERE id = $1 AND is_deleted = false"
GET_ALL_ROOMS = "SELECT id, room_number, room_type, capacity, facility, price, status, created_at, updated_at FROM rooms WHERE is_deleted = false ORDER BY id LIMIT $1 OFFSET $2"

# Service
CREATE_SERVICE = "INSERT INTO services (id, name, price, updated_at) VALUES ($1, $2, $3, $4) RETURNING id, name, price, created_at, updated_at"
UPDATE_SERVICE = "UPDATE services SET name = $2, price = $3, updated_at = $4 WHERE id = $1 AND is_deleted = false RETURNING id, name, price, created_at, updated_at"
DELETE_SERVICE = "UPDATE services SET is_deleted = true WHERE id = $1"
GET_SERVICE = "SELECT id, name, price, created_at, updated_at FROM services WHERE id = $1 AND is_deleted = false"
GET_ALL_SERVICES = "SELECT id, name, price, created_at, updated_at FROM services WHERE is_deleted = false ORDER BY id LIMIT $1 OFFSET $2"

# Booking
CREATE_BOOKING = "INSERT INTO bookings (night, check_in, check_out, user_id, customer_id, total_price, updated_at) VALUES ($1, $2, $3, $4, $5, $6, $7) RETURNING id, night, check_in, check_out, user_id, customer_id, is_agree, information, total_price, created_at, updated_at"
UPDATE_BOOKING = "UPDATE bookings SET is_agree = $2, information = $3, total_price = $4, updated_at = $5 WHERE id = $1 AND is_deleted = false RETURNING id, night, check_in, check_out, user_id, customer_id, is_agree, information, total_price, created_at, updated_at"
DELETE_BOOKING = "UPDATE bookings SET is_deleted = true WHERE id = $1"
GET_BOOKING = "SELECT id, night, check_in, check_out, user_id, customer_id, is_agree, information, total_price, created_at, updated_at FROM bookings WHERE id = $1 AND is_deleted = false"
GET_ALL_BOOKINGS = "SELECT id, night, check_in, check_out, user_id, customer_id, is_agree, information, total_price, created_at, updated_at FROM bookings WHERE is_deleted = false ORDER BY id LIMIT $1 OFFSET $2"

# Booking detail
CREATE_BOOKING_DETAIL = "INSERT INTO booking_details (booking_id, room_id, sub_total, updated_at) VALUES ($1, $2, $3, $4) RETURNING id, booking_id, room_id, sub_total, created_at, updated_at"
GET_BOOKING_DETAIL = "SELECT id, booking_id, room_id, sub_total, created_at, updated_at FROM booking_details WHERE booking_id = $1 AND is_deleted = false"
UPDATE_BOOKING_DETAIL = "UPDATE booking_details SET sub_total = $2, updated_at = $3 WHERE id = $1 AND is_deleted = false RETURNING id, booking_id, room_id, sub_total, created_at, updated_at"
DELETE_BOOKING_DETAIL = "UPDATE booking_details SET is_deleted = true WHERE id = $1"
GET_ALL_BOOKING_DETAILS = "SELECT id, booking_id, room_id, sub_total, created_at, updated_at FROM booking_details WHERE is_deleted = false"

# Booking detail service
CREATE_BOOKING_DETAIL_SERVICE = "INSERT INTO booking_detail_services (booking_detail_id, service_id, service_name, updated_at) VALUES ($1, $2, $3, $4) RETURNING id, booking_detail_id, service_id, service_name, created_at, updated_at"
GET_BOOKING_DETAIL_SERVICE = "SELECT id, booking_detail_id, service_id, service_name, created_at, updated_at, FROM booking_detail_services WHERE id = $1 AND is_deleted = false"
DELETE_BOOKING_DETAIL_SERVICE = "UPDATE booking_detail_services SET is_deleted = true WHERE id = $1"
GET_ALL_BOOKING_DETAIL_SERVICES = "SELECT id, booking_detail_id, service_id, created_at, updated_at FROM booking_detail_services WHERE is_deleted = false"

# Custom queries
GET_ROLE_NAME = "SELECT role_name FROM roles WHERE id = $1 AND is_deleted = false"
GET_BY_EMAIL = "SELECT id, role_name, password FROM users WHERE email = $1"
UPDATE_USER_HASH = "UPDATE users SET password = $2 WHERE id = $1 AND is_deleted = false RETURNING id, name, email, role_id, role_name, created_at, updated_at"
UPDATE_BOOKING_STATUS = "UPDATE bookings SET is_agree = $2, information = $3 WHERE id = $1 AND is_deleted = false RETURNING id, night, check_in, check_out, user_id, customer_id, is_agree, information, total_price, created_at, updated_at"
UPDATE_ROOM_STATUS = "UPDATE rooms SET status = 'booked' WHERE id = $1"
GET_BOOKING_ONE_DAY = "SELECT id, check_in, check_out, user_id, customer_id, is_agree, information, total_price FROM bookings WHERE check_in = $1"
GET_BOOKING_ONE_MONTH = 'SELECT id, check_in, check_out, user_id, customer_id, is_agree, information, total_price FROM bookings WHERE EXTRACT(MONTH FROM "check_in") = $1 AND EXTRACT(YEAR FROM "check_in") = $2'
GET_BOOKING_ONE_YEAR = 'SELECT id, check_in, check_out, user_id, customer_id, is_agree, information, total_price FROM bookings WHERE EXTRACT(YEAR FROM "check_in") = $1'